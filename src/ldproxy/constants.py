from __future__ import annotations

"""Project-wide constants used across modules.

Flag spellings, environment variable names and side-channel markers live here
so the parser, the merger and the tests agree on a single source of truth.
"""

# Control flags understood (and consumed) by ldproxy.
FLAG_PREFIX: str = '--ldproxy'
LINKER_FLAG: str = '--ldproxy-linker'
DEDUP_LIBS_FLAG: str = '--ldproxy-dedup-libs'
CWD_FLAG: str = '--ldproxy-cwd'

VALUE_FLAGS: frozenset[str] = frozenset({LINKER_FLAG, CWD_FLAG})
SWITCH_FLAGS: frozenset[str] = frozenset({DEDUP_LIBS_FLAG})

# Linker resolution fallbacks, consulted in order.
TARGET_CC_ENV_VARS: tuple[str, ...] = (
    'CC_riscv32imafc_esp_espidf',
    'CC_riscv32imac_esp_espidf',
    'CC_riscv32imc_esp_espidf',
)
GENERIC_CC_ENV_VAR: str = 'CC'
KNOWN_LINKERS: tuple[str, ...] = (
    'riscv32-esp-elf-gcc',
    'riscv32-unknown-elf-gcc',
    'riscv64-unknown-elf-gcc',
)

# Target directory inference: .../target/<triple>/<profile>/deps/<artifact>
TARGET_MARKER: str = '/target/'
DEPS_MARKER: str = '/deps/'

# Side channel written by the esp-idf-sys build script.
BUILD_SUBDIR: str = 'build'
COMPANION_DIR_PREFIX: str = 'esp-idf-sys-'
COMPANION_FILE: str = 'output'
LINK_ARG_DIRECTIVE: str = 'cargo:rustc-link-arg='
CWD_MARKER: str = CWD_FLAG
LINKER_MARKER: str = LINKER_FLAG

LIB_FLAG_PREFIX: str = '-l'

RESPONSE_FILE_THRESHOLD: int = 500
RESPONSE_FILE_TEMPLATE: str = 'ldproxy-{pid}.rsp'

# Environment.
LOG_ENV_VAR: str = 'LDPROXY_LOG'
LOG_STYLE_ENV_VAR: str = 'LDPROXY_LOG_STYLE'
LINK_FAIL_ENV_VAR: str = 'LDPROXY_LINK_FAIL'
DEFAULT_LOG_FILTER: str = 'info'
DEFAULT_LOG_STYLE: str = 'auto'
