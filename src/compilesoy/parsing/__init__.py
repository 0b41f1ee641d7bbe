from compilesoy.parsing.arguments import (
    ParameterTreeBuilder,
    ParamState,
    build_config,
    build_params,
    parse_args,
    split_arguments,
)

__all__ = [
    'ParameterTreeBuilder',
    'ParamState',
    'build_config',
    'build_params',
    'parse_args',
    'split_arguments',
]
