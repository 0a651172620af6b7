from .app import synth
from .main_stack import MainStack
from .schema import CdktfAppConfig

__all__ = ["CdktfAppConfig", "MainStack", "synth"]
