"""
Lombok annotations for generated classes.

Which annotations are emitted starts from the ``features.lombok`` settings and
is then patched per type by ``@lombok(exclude: [...], include: [...])``:
excludes are applied first, includes second.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import LombokConfig
from ..schema.directives import extract_lombok
from ..schema.model import TypeDefinition
from .base import AnnotationList


@dataclass(frozen=True)
class LombokAnnotation:
    name: str
    import_: str


# Emission order of the annotations
LOMBOK_ANNOTATIONS: dict[str, LombokAnnotation] = {
    "data": LombokAnnotation("@Data", "lombok.Data"),
    "builder": LombokAnnotation("@Builder", "lombok.Builder"),
    "noArgsConstructor": LombokAnnotation("@NoArgsConstructor", "lombok.NoArgsConstructor"),
    "allArgsConstructor": LombokAnnotation("@AllArgsConstructor", "lombok.AllArgsConstructor"),
    "getter": LombokAnnotation("@Getter", "lombok.Getter"),
    "setter": LombokAnnotation("@Setter", "lombok.Setter"),
    "toString": LombokAnnotation("@ToString", "lombok.ToString"),
    "equalsAndHashCode": LombokAnnotation("@EqualsAndHashCode", "lombok.EqualsAndHashCode"),
    "value": LombokAnnotation("@Value", "lombok.Value"),
    "superBuilder": LombokAnnotation("@SuperBuilder", "lombok.experimental.SuperBuilder"),
}


class LombokGenerator:
    """Generates the class-level Lombok annotations."""

    def __init__(self, config: LombokConfig | None = None):
        self.config = config or LombokConfig()

    def enabled_facets(self, type_def: TypeDefinition | None = None) -> dict[str, bool]:
        enabled = {
            "data": self.config.data,
            "builder": self.config.builder,
            "noArgsConstructor": self.config.no_args_constructor,
            "allArgsConstructor": self.config.all_args_constructor,
            "getter": self.config.getter,
            "setter": self.config.setter,
        }
        directive = extract_lombok(type_def.directives) if type_def is not None else None
        if directive is not None:
            for name in directive.exclude:
                enabled[name] = False
            for name in directive.include:
                enabled[name] = True
        return enabled

    def type_annotations(self, type_def: TypeDefinition) -> AnnotationList:
        result = AnnotationList()
        if not self.config.enabled:
            return result

        enabled = self.enabled_facets(type_def)
        for name, annotation in LOMBOK_ANNOTATIONS.items():
            if enabled.get(name):
                result.add(annotation.name, [annotation.import_])
        return result

    def needs_accessors(self, type_def: TypeDefinition | None = None) -> bool:
        """True when getters and setters must be written out by hand."""
        if not self.config.enabled:
            return True
        enabled = self.enabled_facets(type_def)
        if enabled.get("data") or enabled.get("value"):
            return False
        return not (enabled.get("getter") and enabled.get("setter"))

    def needs_constructors(self, type_def: TypeDefinition | None = None) -> bool:
        """True when no Lombok constructor annotation is emitted."""
        if not self.config.enabled:
            return True
        enabled = self.enabled_facets(type_def)
        return not enabled.get("noArgsConstructor") and not enabled.get("allArgsConstructor")
