from setuptools import find_packages, setup
from setuptools.command.install import install
import sys


class InstallLdproxy(install):
    """Install ldproxy and remind the user how to hook it into cargo."""

    def run(self):
        super().run()

        print(
            "\n⚠  Point cargo at ldproxy in .cargo/config.toml, e.g.\n"
            "   [target.riscv32imc-esp-espidf]\n"
            '   linker = "ldproxy"\n'
            '   rustflags = ["-C", "link-arg=--ldproxy-linker", "-C", "link-arg=riscv32-esp-elf-gcc"]',
            file=sys.stderr,
        )


setup(
    name="ldproxy",
    version="0.1.0",
    description="Linker proxy that forwards rustc link arguments to the real linker",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["ldproxy=ldproxy.cli:main"]},
    cmdclass={"install": InstallLdproxy},
)
