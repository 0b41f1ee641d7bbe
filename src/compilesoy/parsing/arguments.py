from __future__ import annotations

"""
arguments – convention-based parser for compilesoy command lines.

Tokens take one of three shapes:

    --name=value    one argument
    --name value    one argument; the value is the following token
    --              phase separator (first occurrence only)

Arguments before the separator are *control* options and fold into a flat
mapping where the last value wins. Arguments after it are *data* and fold
into a parameter tree for the template engine:

    --title=Home                  -> {'title': 'Home'}
    --tag=a --tag=b               -> {'tag': ('a', 'b')}
    --tag[]=a                     -> {'tag': ('a',)}
    --tag=a --tag[]=b             -> {'tag': ('a', 'b')}

A single value only becomes a list when its name carries the `[]` marker,
so templates that expect a list must be fed `--name[]=value`. The tree that
`parse_args` returns is read-only.
"""

import enum
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple

from compilesoy.constants import ARG_PREFIX, LIST_MARKER, SEPARATOR
from compilesoy.core.errors import InvalidArgument, MissingValue
from compilesoy.core.models import Argument, ParamValue, ParsedArgs


class ParamState(enum.Enum):
    """Per-name state of the parameter tree builder."""

    UNSEEN = 'unseen'
    SCALAR = 'scalar'
    SEQUENCE = 'sequence'


def split_list_marker(name: str) -> Tuple[str, bool]:
    """Return `(canonical_name, marked)` for an argument name."""
    if name.endswith(LIST_MARKER):
        return name[: -len(LIST_MARKER)], True
    return name, False


class ParameterTreeBuilder:
    """Fold data-phase arguments into a `name -> str | list[str]` tree.

    Transitions (marker = name ends with '[]'):

        unseen   + plain   -> scalar    [v]
        unseen   + marker  -> sequence  [v]
        scalar   + any     -> sequence  [old, v]
        sequence + any     -> sequence  [..., v]
    """

    def __init__(self) -> None:
        self._states: Dict[str, ParamState] = {}
        self._scalars: Dict[str, str] = {}
        self._sequences: Dict[str, List[str]] = {}
        self._order: List[str] = []

    def state_of(self, name: str) -> ParamState:
        canonical, _ = split_list_marker(name)
        return self._states.get(canonical, ParamState.UNSEEN)

    def add(self, arg: Argument) -> ParamState:
        canonical, marked = split_list_marker(arg.name)
        state = self._states.get(canonical, ParamState.UNSEEN)

        if state is ParamState.UNSEEN:
            self._order.append(canonical)
            if marked:
                self._sequences[canonical] = [arg.value]
                new_state = ParamState.SEQUENCE
            else:
                self._scalars[canonical] = arg.value
                new_state = ParamState.SCALAR
        elif state is ParamState.SCALAR:
            self._sequences[canonical] = [self._scalars.pop(canonical), arg.value]
            new_state = ParamState.SEQUENCE
        else:
            self._sequences[canonical].append(arg.value)
            new_state = ParamState.SEQUENCE

        self._states[canonical] = new_state
        return new_state

    def extend(self, args: Sequence[Argument]) -> 'ParameterTreeBuilder':
        for arg in args:
            self.add(arg)
        return self

    def build(self) -> Dict[str, ParamValue]:
        """Return a fresh tree in first-encounter order of names."""
        tree: Dict[str, ParamValue] = {}
        for name in self._order:
            if self._states[name] is ParamState.SCALAR:
                tree[name] = self._scalars[name]
            else:
                tree[name] = list(self._sequences[name])
        return tree

    def freeze(self) -> Mapping[str, ParamValue]:
        """Read-only view of the tree; sequences become tuples."""
        tree: Dict[str, ParamValue] = {}
        for name in self._order:
            if self._states[name] is ParamState.SCALAR:
                tree[name] = self._scalars[name]
            else:
                tree[name] = tuple(self._sequences[name])
        return MappingProxyType(tree)


def _parse_token(tokens: Sequence[str], i: int) -> Tuple[Argument, int]:
    """Parse the argument starting at `tokens[i]`; return it and the next index."""
    token = tokens[i]
    body = token[len(ARG_PREFIX):]
    eq = body.find('=')
    if eq > 0:
        return Argument(body[:eq], body[eq + 1:]), i + 1
    if eq == 0 or not body:
        raise InvalidArgument(token)
    if i + 1 < len(tokens) and not tokens[i + 1].startswith(ARG_PREFIX):
        return Argument(body, tokens[i + 1]), i + 2
    raise MissingValue(token)


def iter_arguments(tokens: Sequence[str]) -> Iterator[Tuple[bool, Argument]]:
    """Yield `(is_data, argument)` for every argument in *tokens*.

    Only the first separator switches phase. Any later `--` is treated as a
    data token and rejected as an invalid argument.
    """
    data_phase = False
    i = 0
    n = len(tokens)
    while i < n:
        token = tokens[i]
        if not token.startswith(ARG_PREFIX):
            raise InvalidArgument(token)
        if token == SEPARATOR and not data_phase:
            data_phase = True
            i += 1
            continue
        arg, i = _parse_token(tokens, i)
        yield data_phase, arg


def split_arguments(tokens: Sequence[str]) -> Tuple[List[Argument], List[Argument]]:
    """Return `(control_args, data_args)` in encounter order."""
    control: List[Argument] = []
    data: List[Argument] = []
    for is_data, arg in iter_arguments(tokens):
        (data if is_data else control).append(arg)
    return control, data


def build_config(args: Sequence[Argument]) -> Dict[str, str]:
    """Fold control arguments into a flat mapping; the last value wins."""
    config: Dict[str, str] = {}
    for arg in args:
        config[arg.name] = arg.value
    return config


def build_params(args: Sequence[Argument]) -> Dict[str, ParamValue]:
    return ParameterTreeBuilder().extend(args).build()


def parse_args(tokens: Sequence[str]) -> ParsedArgs:
    """Parse the whole command line into control options and a parameter tree.

    Raises:
        InvalidArgument: a token lacks the '--' prefix or has an empty name.
        MissingValue: a name-only token is not followed by a value.
    """
    control, data = split_arguments(list(tokens))
    return ParsedArgs(
        config=MappingProxyType(build_config(control)),
        params=ParameterTreeBuilder().extend(data).freeze(),
    )


def params_summary(params: Mapping[str, ParamValue]) -> Dict[str, str]:
    """Describe each parameter's shape for debug logging."""
    return {
        name: (f'list[{len(value)}]' if isinstance(value, (list, tuple)) else 'str')
        for name, value in params.items()
    }
