"""
Type analyzer that builds the schema registry.

Analyzes a class (usually a POJO) for its properties and derives the
representations used to document its JSON/XML shape. Every type reachable
from the analyzed root is registered exactly once; nested types are referenced
through their identifiers, which lets cyclic type graphs terminate.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..config import AnalyzerConfig
from ..model.representations import TypeRepresentation, of_collection, of_concrete
from ..model.signatures import parse_signature
from ..model.triple import Triple
from ..model.types import Type, TypeIdentifier
from ..reflection.class_pool import ClassNotFoundError, ClassPool
from ..reflection.nodes import ClassInfo, FieldInfo, MethodInfo
from .access import AccessType, normalize_getter
from .context import AnalysisContext
from .errors import AnalysisError
from .generics import GenericTypeResolver
from .normalizer import TypeNormalizer

logger = logging.getLogger(__name__)

# (property name, resolved type, member carries annotations)
MappedMember = Triple[str, Type, bool]


class TypeAnalyzer:
    """Resolves types into representations stored in an AnalysisContext."""

    def __init__(
        self,
        class_pool: ClassPool,
        config: AnalyzerConfig | None = None,
        context: AnalysisContext | None = None,
        normalizer: TypeNormalizer | None = None,
        generic_resolver: GenericTypeResolver | None = None,
    ):
        """
        Initialize the analyzer.

        Args:
            class_pool: Lookup of reflected classes
            config: Analyzer configuration
            context: Registry and visited set to populate (created if omitted)
            normalizer: Wrapper/collection normalizer
            generic_resolver: Resolver for generic member types
        """
        self.class_pool = class_pool
        self.config = config or AnalyzerConfig()
        self.context = context if context is not None else AnalysisContext()
        self.normalizer = normalizer or TypeNormalizer(self.config, class_pool)
        self.generic_resolver = generic_resolver or GenericTypeResolver(class_pool)

    @property
    def type_representations(self) -> dict[TypeIdentifier, TypeRepresentation]:
        return self.context.type_representations

    def analyze(self, root_type: Type) -> TypeIdentifier:
        """
        Analyze a type and, recursively, every type it references.

        Args:
            root_type: The type to analyze

        Returns:
            The identifier of the (wrapper-normalized) type. Opaque types get
            an identifier but no registry entry.

        Raises:
            AnalysisError: If a referenced class cannot be located, or if the
                nesting is deeper than max_depth or the interpreter stack allows
        """
        type_ = self.normalizer.normalize_wrapper(root_type)
        if self.context.depth > 0:
            return self._resolve(type_)

        try:
            return self._resolve(type_)
        except RecursionError as e:
            # The interpreter stack ran out before max_depth was reached
            raise AnalysisError(f"Type nesting too deep to analyze {type_}", type_) from e

    def _resolve(self, type_: Type) -> TypeIdentifier:
        identifier = TypeIdentifier.of_type(type_)

        if not self.context.is_analyzed(type_) and (self.normalizer.is_collection(type_) or not self._is_opaque(type_)):
            # Marked before recursing so cyclic references short-circuit here
            self.context.mark_analyzed(type_)
            self._enter(type_)
            try:
                representation = self._analyze_internal(identifier, type_)
            finally:
                self.context.depth -= 1
            self.context.register(representation)
            logger.debug("Registered %s as %s", identifier, representation.kind.value)

        return identifier

    def _enter(self, type_: Type) -> None:
        max_depth = self.config.max_depth
        if max_depth is not None and self.context.depth >= max_depth:
            raise AnalysisError(f"Maximum analysis depth of {max_depth} exceeded at {type_}", type_)
        self.context.depth += 1

    def _is_opaque(self, type_: Type) -> bool:
        if self.normalizer.is_opaque_platform(type_):
            return True
        return self._get_class(type_).is_enum

    def _get_class(self, type_: Type) -> ClassInfo:
        try:
            return self.class_pool.get(type_.name)
        except ClassNotFoundError as e:
            raise AnalysisError(f"Could not analyze {type_}: {e}", type_) from e

    def _analyze_internal(self, identifier: TypeIdentifier, type_: Type) -> TypeRepresentation:
        logger.debug("Analyzing %s", type_)

        if self.normalizer.is_collection(type_):
            element_type = self.normalizer.normalize_collection(type_)
            return of_collection(identifier, self._resolve(element_type))

        return of_concrete(identifier, self._analyze_class(type_))

    def _analyze_class(self, type_: Type, subtypes: frozenset[str] = frozenset()) -> dict[str, TypeIdentifier]:
        """
        Compute the flattened properties of a class.

        Interfaces are merged first, then the superclass, then the class's own
        members, so later declarations win on name collisions.
        """
        if self.normalizer.is_opaque_platform(type_):
            return {}

        class_info = self._get_class(type_)
        if class_info.is_enum:
            return {}

        if type_.name in subtypes:
            raise AnalysisError(f"Cyclic inheritance detected at {type_}", type_)
        subtypes = subtypes | {type_.name}

        access_type = self._get_access_type(class_info)
        properties: dict[str, TypeIdentifier] = {}

        # calculate inherited properties in inheritance chain
        for interface in class_info.interfaces:
            interface_type = self.generic_resolver.resolve_supertype(interface, type_)
            properties.update(self._analyze_class(interface_type, subtypes))

        if class_info.superclass:
            super_type = self.generic_resolver.resolve_supertype(class_info.superclass, type_)
            properties.update(self._analyze_class(super_type, subtypes))

        for name, member_type, annotated in self._map_relevant_members(class_info, access_type, type_):
            properties[name] = self.analyze(member_type).with_annotations(annotated)

        return properties

    def _get_access_type(self, class_info: ClassInfo) -> AccessType:
        annotation = self.config.accessor_type_annotation
        current: ClassInfo | None = class_info
        seen = set()

        while current is not None and current.name not in seen:
            seen.add(current.name)
            if current.has_annotation(annotation):
                try:
                    return AccessType.from_annotation(current.get_annotation(annotation))
                except ValueError as e:
                    logger.warning("Ignoring accessor type annotation of %s: %s", current.name, e)
                    break
            if not current.superclass:
                break

            super_type = Type(parse_signature(current.superclass).name)
            if self.normalizer.is_opaque_platform(super_type):
                break
            try:
                current = self.class_pool.get(super_type.name)
            except ClassNotFoundError as e:
                logger.error("Could not analyze accessor type annotation of %s: %s", class_info.name, e)
                break

        return AccessType.PUBLIC_MEMBER

    def _map_relevant_members(self, class_info: ClassInfo, access_type: AccessType, owner: Type) -> Iterator[MappedMember]:
        for field in class_info.fields:
            if access_type.is_field_relevant(field, self.config):
                mapped = self._map_field(field, owner)
                if mapped is not None:
                    yield mapped

        for method in class_info.methods:
            if access_type.is_getter_relevant(method, self.config):
                mapped = self._map_getter(method, owner)
                if mapped is not None:
                    yield mapped

    def _map_field(self, field: FieldInfo, owner: Type) -> MappedMember | None:
        type_ = self.generic_resolver.resolve(field.type_signature, owner)
        if type_ is None:
            logger.debug("Skipping field %s.%s: cannot resolve %s", owner, field.name, field.type_signature)
            return None
        return Triple.of(field.name, type_, bool(field.annotations))

    def _map_getter(self, method: MethodInfo, owner: Type) -> MappedMember | None:
        type_ = self.generic_resolver.resolve(method.return_type, owner, method.type_parameters)
        if type_ is None:
            logger.debug("Skipping getter %s.%s: cannot resolve %s", owner, method.name, method.return_type)
            return None
        return Triple.of(normalize_getter(method.name), type_, bool(method.annotations))
