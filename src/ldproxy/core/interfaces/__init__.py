from .process import LinkerInvokerProtocol, ProcessRunnerProtocol

__all__ = [
    'LinkerInvokerProtocol',
    'ProcessRunnerProtocol',
]
