"""
Walks the type reference graph from a set of root types and collects one
definition per distinct, visible type.
"""
from typing import AbstractSet, Any, Iterable

import structlog

from ..annotations.inspector import AnnotationInspector, ReflectionAnnotationInspector, is_hidden
from ..classification.type_classifier import DefaultTypeClassifier, TypeClassifier
from ..classification.type_utils import type_identity
from ..models.catalog import Definition
from .type_converter import TypeConverter

logger = structlog.get_logger(__name__)


class DefinitionsBuilder:
    """
    Builds schema catalogs. Holds no traversal state between calls, so one instance
    can serve independent builds.
    """

    def __init__(self, classifier: TypeClassifier | None = None, inspector: AnnotationInspector | None = None):
        self.classifier = classifier or DefaultTypeClassifier()
        self.inspector = inspector or ReflectionAnnotationInspector()
        self.converter = TypeConverter(self.classifier, self.inspector)
        self.logger = logger.bind(service="DefinitionsBuilder")

    def is_hidden(self, tp: Any, hidden_tags: AbstractSet[str]) -> bool:
        if type_identity(tp) in hidden_tags:
            return True
        return is_hidden(self.inspector.get_type_markers(tp), hidden_tags)

    def build(self, hidden_tags: Iterable[str] | None, root_types: Iterable[Any] | None) -> list[Definition]:
        """
        Returns one definition per reachable, non-hidden type.

        Root types are processed last-in first-out: with roots ``[A, B]`` the
        definition of B comes before the one of A.
        """
        hidden = frozenset(hidden_tags or ())
        roots: dict[str, Any] = {}
        for tp in root_types or ():
            roots.setdefault(type_identity(tp), tp)
        if not roots:
            return []

        log = self.logger.bind(root_count=len(roots), hidden_tags=sorted(hidden))
        log.debug("Starting catalog build.")

        definitions: list[Definition] = []
        seen: set[str] = set()
        pending: list[Any] = list(roots.values())

        # Seen is checked on pop, so a type may sit on the stack more than once but is converted once.
        while pending:
            tp = pending.pop()
            identity = type_identity(tp)
            if self.is_hidden(tp, hidden):
                log.debug("Skipping hidden type.", type_name=identity)
                continue
            if identity in seen:
                continue

            seen.add(identity)
            schema = self.converter.convert_type(tp, hidden, pending)
            definitions.append(Definition(type_schema=schema))

        log.info("Catalog build complete.", definition_count=len(definitions))
        return definitions


def build_catalog(
    hidden_tags: Iterable[str] | None,
    root_types: Iterable[Any] | None,
    *,
    classifier: TypeClassifier | None = None,
    inspector: AnnotationInspector | None = None,
) -> list[Definition]:
    """Convenience wrapper around `DefinitionsBuilder.build`."""
    return DefinitionsBuilder(classifier=classifier, inspector=inspector).build(hidden_tags, root_types)
