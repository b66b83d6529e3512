"""Descriptors of the methods and properties exposed by a JSON-RPC API namespace

A descriptor only describes an operation: which RPC method to call, how many arguments it takes
and how its arguments and result are converted. Sending the request is left to the dispatcher
that consumes the descriptor.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable, List, Optional, Sequence, Tuple, Union

from .exceptions import InvalidDescriptorError

Formatter = Callable[[Any], Any]
SelectorFunction = Callable[[Sequence[Any]], str]


@dataclass(frozen=True)
class FixedCall:
    selector: str


@dataclass(frozen=True)
class ComputedCall:
    """The RPC method is picked per call from the call arguments"""

    selector_fn: SelectorFunction


Call = Union[FixedCall, ComputedCall]


@dataclass(frozen=True)
class NoFormatter:
    def plan(self, params: int) -> Tuple[Optional[Formatter], ...]:
        return (None,) * params


@dataclass(frozen=True)
class SingleFormatter:
    """A lone formatter, applied to the first argument only"""

    formatter: Formatter

    def plan(self, params: int) -> Tuple[Optional[Formatter], ...]:
        return (self.formatter,) + (None,) * (params - 1)


@dataclass(frozen=True)
class PerArgumentFormatter:
    """One formatter per argument; `None` passes the argument through unchanged"""

    formatters: Tuple[Optional[Formatter], ...]

    def plan(self, params: int) -> Tuple[Optional[Formatter], ...]:
        return self.formatters + (None,) * (params - len(self.formatters))


InputFormatter = Union[NoFormatter, SingleFormatter, PerArgumentFormatter]


def _to_call(call: Union[str, SelectorFunction, Call]) -> Call:
    if isinstance(call, (FixedCall, ComputedCall)):
        return call
    if isinstance(call, str):
        return FixedCall(call)
    if callable(call):
        return ComputedCall(call)
    raise InvalidDescriptorError(f"{call!r} is neither an RPC method name nor a selector function")


def _to_input_formatter(
    formatter: Union[None, Formatter, Sequence[Optional[Formatter]], InputFormatter]
) -> InputFormatter:
    if formatter is None:
        return NoFormatter()
    if isinstance(formatter, (NoFormatter, SingleFormatter, PerArgumentFormatter)):
        return formatter
    if callable(formatter):
        return SingleFormatter(formatter)
    if isinstance(formatter, (str, bytes)) or not isinstance(formatter, Iterable):
        raise InvalidDescriptorError(
            f"{formatter!r} is neither a formatter nor a sequence of formatters"
        )
    formatters = tuple(formatter)
    for fmt in formatters:
        if fmt is not None and not callable(fmt):
            raise InvalidDescriptorError(f"Input formatter {fmt!r} is not callable")
    return PerArgumentFormatter(formatters)


def _split_path(name: str) -> Tuple[str, ...]:
    return tuple(name.split("."))


@dataclass(frozen=True)
class MethodDescriptor:
    """Describes one RPC method

    `call` and `input_formatter` may be given in their short forms: an RPC method name or a
    selector function for `call`, and a single function or a sequence of functions (one per
    argument) for `input_formatter`. Both are normalised on construction.
    """

    logger: ClassVar[logging.Logger] = logging.getLogger(__name__)

    name: str
    call: Call
    params: int = 0
    input_formatter: InputFormatter = NoFormatter()
    output_formatter: Optional[Formatter] = None

    def __post_init__(self):
        if not self.name:
            raise InvalidDescriptorError("A method must have a name")
        object.__setattr__(self, "call", _to_call(self.call))
        object.__setattr__(self, "input_formatter", _to_input_formatter(self.input_formatter))
        if isinstance(self.call, FixedCall) and not self.call.selector:
            raise InvalidDescriptorError(f"Method '{self.name}' has an empty RPC method name")
        if not isinstance(self.params, int) or isinstance(self.params, bool) or self.params < 0:
            raise InvalidDescriptorError(
                f"Method '{self.name}' has an invalid parameter count {self.params!r}"
            )
        if isinstance(self.input_formatter, SingleFormatter) and self.params < 1:
            raise InvalidDescriptorError(
                f"Method '{self.name}' takes no parameters but has an input formatter"
            )
        if (
            isinstance(self.input_formatter, PerArgumentFormatter)
            and len(self.input_formatter.formatters) > self.params
        ):
            raise InvalidDescriptorError(
                f"Method '{self.name}' has {len(self.input_formatter.formatters)} input formatters"
                f" for {self.params} parameters"
            )

    def __repr__(self) -> str:
        return f"<MethodDescriptor: {self.name}>"

    @property
    def path(self) -> Tuple[str, ...]:
        return _split_path(self.name)

    def resolve_call(self, args: Sequence[Any]) -> str:
        """Return the RPC method to send for the given call arguments"""
        if isinstance(self.call, FixedCall):
            return self.call.selector
        selector = self.call.selector_fn(args)
        self.logger.debug("%s%r resolved to %s", self.name, tuple(args), selector)
        return selector

    def input_plan(self) -> Tuple[Optional[Formatter], ...]:
        """Return the formatter to apply to each argument, `None` meaning "pass through" """
        return self.input_formatter.plan(self.params)

    def format_input(self, args: Sequence[Any]) -> List[Any]:
        """Apply the input formatters to the call arguments

        A formatter may return a falsy value to mark its argument as invalid; such values are
        returned as they are, for the dispatcher to act on.
        """
        plan = self.input_plan()
        formatted = [arg if fmt is None else fmt(arg) for fmt, arg in zip(plan, args)]
        formatted.extend(args[len(plan) :])
        return formatted

    def format_output(self, result: Any) -> Any:
        if self.output_formatter is None or result is None:
            return result
        return self.output_formatter(result)


@dataclass(frozen=True)
class PropertyDescriptor:
    """Describes an attribute read with the `getter` RPC method and written with `setter`

    A deprecated property names its replacement in `deprecated`. It still works; warning the user
    is up to the code that accesses it.
    """

    name: str
    getter: str
    setter: Optional[str] = None
    output_formatter: Optional[Formatter] = None
    deprecated: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise InvalidDescriptorError("A property must have a name")
        if not self.getter:
            raise InvalidDescriptorError(f"Property '{self.name}' has no getter")
        if self.deprecated is not None and (not self.deprecated or self.deprecated == self.name):
            raise InvalidDescriptorError(
                f"Property '{self.name}' has an invalid replacement {self.deprecated!r}"
            )

    def __repr__(self) -> str:
        return f"<PropertyDescriptor: {self.name}>"

    @property
    def path(self) -> Tuple[str, ...]:
        return _split_path(self.name)

    @property
    def is_deprecated(self) -> bool:
        return self.deprecated is not None

    @property
    def is_writable(self) -> bool:
        return self.setter is not None

    def deprecation_message(self) -> Optional[str]:
        if self.deprecated is None:
            return None
        return f"'{self.name}' is deprecated, use '{self.deprecated}' instead"

    def format_output(self, result: Any) -> Any:
        if self.output_formatter is None or result is None:
            return result
        return self.output_formatter(result)
