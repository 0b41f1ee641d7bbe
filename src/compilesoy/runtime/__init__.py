from compilesoy.runtime.config import load_config
from compilesoy.runtime.runner import SoyCompilerRunner

__all__ = ['load_config', 'SoyCompilerRunner']
