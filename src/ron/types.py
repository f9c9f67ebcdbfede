"""Type definitions for the RON serializer."""

import os
from collections.abc import Callable, Mapping
from dataclasses import asdict, dataclass, fields, replace
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .serializer import Serializer


@runtime_checkable
class Serialize(Protocol):
    """A value that drives the serializer protocol itself."""

    def serialize(self, serializer: "Serializer") -> None:
        ...


@dataclass(frozen=True)
class PrettyConfig:
    """Layout options for pretty RON output."""

    new_line: str = os.linesep
    """Line terminator written after every element, field and entry."""

    indentor: str = "    "
    """String repeated once per indentation level."""

    separate_tuple_members: bool = False
    """Put each tuple member on its own indented line."""

    struct_names: bool = True
    """Write struct names in front of struct bodies."""

    add_space: bool = True
    """Write a space after separators in tuples, maps and structs."""

    @property
    def space(self) -> str:
        """The separator space, empty unless ``add_space`` is set."""
        return " " if self.add_space else ""

    @classmethod
    def default_with(
        cls,
        step: Callable[["PrettyConfig"], "PrettyConfig"] | None = None,
        **overrides: Any,
    ) -> "PrettyConfig":
        """
        Build a configuration from the defaults.

        Args:
            step: Optional callable receiving the default configuration
                (with ``overrides`` applied) and returning the final one.
            **overrides: Option values replacing the defaults.

        Returns:
            The new configuration.
        """
        config = replace(cls(), **overrides)
        if step is not None:
            config = step(config)
        return config

    @classmethod
    def basic(cls, struct_names: bool) -> "PrettyConfig":
        """The whitespace-free preset, identical in output to compact encoding."""
        return cls.default_with(
            new_line="",
            indentor="",
            separate_tuple_members=False,
            struct_names=struct_names,
            add_space=False,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the options as a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "PrettyConfig":
        """
        Build a configuration from a mapping of option names.

        Missing options keep their defaults.

        Raises:
            TypeError: If the mapping holds an unknown option.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise TypeError(f"Unknown PrettyConfig options: {', '.join(unknown)}")
        return cls(**options)

    def serialize(self, serializer: "Serializer") -> None:
        struct = serializer.serialize_struct("PrettyConfig", len(fields(self)))
        for f in fields(self):
            struct.serialize_field(f.name, getattr(self, f.name))
        struct.end()


@dataclass(frozen=True)
class Some:
    """A present optional value, encoded as ``Some(...)``."""

    value: Any


@dataclass(frozen=True)
class Char:
    """A single character, encoded with single quotes."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise ValueError(f"Char needs exactly one character, got {self.value!r}")
