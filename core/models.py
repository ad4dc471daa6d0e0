"""
Core data models for the scan pipeline.

This module defines the data structures produced while scanning a project:
raw element spans found in templates, the controller inventory, the bindings
decoded from element attributes, lint findings, and the complete scan result
that is persisted to the cache file.

Every model knows how to turn itself into the JSON-ready dictionary used by the
cache (`to_dict`) and how to rebuild itself from one (`from_dict`). Optional
keys (`broken`, `hint`, `where`) are omitted from the dictionary when absent.
"""

from dataclasses import dataclass, field
from typing import Any

from models import LintLevel


@dataclass(frozen=True)
class ElementSpan:
    """
    Raw opening-tag text of one template element and where it starts.

    Attributes:
        text: The tag text from "<" to the closing ">" inclusive.
        offset: Index of the "<" within the template source.
    """

    text: str
    offset: int


@dataclass(frozen=True)
class ActionRef:
    event: str
    controller: str
    method: str


@dataclass(frozen=True)
class ControllerDescriptor:
    """
    Identity of one discovered controller module.

    Attributes:
        name: Canonical dash-separated name (e.g. "message-form").
        module_path: Path of the defining file relative to the project root.
    """

    name: str
    module_path: str


@dataclass(frozen=True)
class AggregatedController:
    """
    A controller descriptor enriched with usage gathered from all bindings.

    The `actions`, `targets` and `values` lists are deduplicated and sorted
    ascending, so the cache is byte-for-byte stable across runs.
    """

    name: str
    module_path: str
    element_count: int = 0
    actions: list[str] = field(default_factory=list)
    targets: list[str] = field(default_factory=list)
    values: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "module": self.module_path,
            "elements": self.element_count,
            "actions": list(self.actions),
            "targets": list(self.targets),
            "values": list(self.values),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AggregatedController":
        return cls(
            name=data["name"],
            module_path=data["module"],
            element_count=int(data["elements"]),
            actions=list(data["actions"]),
            targets=list(data["targets"]),
            values=list(data["values"]),
        )


@dataclass(frozen=True)
class TargetRef:
    controller: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"controller": self.controller, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TargetRef":
        return cls(controller=data["controller"], name=data["name"])


@dataclass(frozen=True)
class ValueRef:
    """A typed value declared on an element; `name` is already camel-cased."""

    controller: str
    name: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"controller": self.controller, "name": self.name, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ValueRef":
        return cls(controller=data["controller"], name=data["name"], value=data["value"])


@dataclass(frozen=True)
class Binding:
    """
    One template element carrying at least one binding attribute.

    Attributes:
        id: Sequential identifier within one scan ("el_0001", "el_0002", ...).
        selector: Debugging locator "<file>:<line> <tag prefix...#id>". Not a
            CSS selector and not guaranteed to be unique.
        controllers: Controller names from `data-controller`, in order,
            duplicates kept.
        actions: Raw action strings from `data-action`, in order. Malformed
            strings are kept verbatim and reported by the lint pass.
        targets: Targets declared through `data-<ctrl>-target(s)`.
        values: Values declared through `data-<ctrl>-<name>-value`.
    """

    id: str
    selector: str
    controllers: list[str] = field(default_factory=list)
    actions: list[str] = field(default_factory=list)
    targets: list[TargetRef] = field(default_factory=list)
    values: list[ValueRef] = field(default_factory=list)

    @property
    def broken(self) -> bool:
        """True when the element names a controller but never interacts with it."""
        return bool(self.controllers) and not (
            self.actions or self.targets or self.values
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "selector": self.selector,
            "controllers": list(self.controllers),
            "actions": list(self.actions),
            "targets": [t.to_dict() for t in self.targets],
            "values": [v.to_dict() for v in self.values],
        }
        if self.broken:
            data["broken"] = True
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Binding":
        # "broken" is derived, so the stored flag is not read back
        return cls(
            id=data["id"],
            selector=data["selector"],
            controllers=list(data["controllers"]),
            actions=list(data["actions"]),
            targets=[TargetRef.from_dict(t) for t in data["targets"]],
            values=[ValueRef.from_dict(v) for v in data["values"]],
        )


@dataclass(frozen=True)
class LintFinding:
    level: LintLevel
    title: str
    detail: str
    hint: str | None = None
    where: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "level": str(self.level),
            "title": self.title,
            "detail": self.detail,
        }
        if self.hint is not None:
            data["hint"] = self.hint
        if self.where is not None:
            data["where"] = self.where
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LintFinding":
        return cls(
            level=LintLevel(data["level"]),
            title=data["title"],
            detail=data["detail"],
            hint=data.get("hint"),
            where=data.get("where"),
        )


@dataclass(frozen=True)
class ScanMeta:
    root: str
    generated_at: str

    def to_dict(self) -> dict[str, Any]:
        return {"root": self.root, "generated_at": self.generated_at}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScanMeta":
        return cls(root=data["root"], generated_at=data["generated_at"])


@dataclass(frozen=True)
class ScanResult:
    """
    The single artifact produced by a scan and persisted to the cache.

    `bindings` and `lint` are derived from template content, `controllers` from
    the inventory plus `bindings`, so a result is always self-consistent for the
    source tree it was computed from.
    """

    meta: ScanMeta
    controllers: list[AggregatedController] = field(default_factory=list)
    bindings: list[Binding] = field(default_factory=list)
    lint: list[LintFinding] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "meta": self.meta.to_dict(),
            "controllers": [c.to_dict() for c in self.controllers],
            "bindings": [b.to_dict() for b in self.bindings],
            "lint": [f.to_dict() for f in self.lint],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScanResult":
        return cls(
            meta=ScanMeta.from_dict(data["meta"]),
            controllers=[AggregatedController.from_dict(c) for c in data["controllers"]],
            bindings=[Binding.from_dict(b) for b in data["bindings"]],
            lint=[LintFinding.from_dict(f) for f in data["lint"]],
        )
