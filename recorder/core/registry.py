"""
Type registry: rebuilds typed actions from their canonical form.

Decoders are looked up by the StandardAction type tag, the same way handlers
are looked up by action type in a reducer table.
"""

from typing import Any, Callable, Dict, List, Mapping, Union

from .actions import StandardAction, StandardActionConvertible
from .errors import UnregisteredActionTypeError

# Decoder signature: (standard_action) -> typed action
Decoder = Callable[[StandardAction], Any]
TypeMap = Mapping[str, Any]


def _as_decoder(decoder: Any) -> Decoder:
    if isinstance(decoder, type) and issubclass(decoder, StandardActionConvertible):
        return decoder.from_standard_action
    if not callable(decoder):
        raise TypeError(f"decoder must be callable, got {decoder!r}")
    return decoder


class TypeRegistry:
    """
    Registry of decoders for typed actions.

    Usage:
        registry = TypeRegistry({"SetUser": SetUser}, {"Login": decode_login})
        action = registry.decode(standard_action)

    Maps are merged in order; on a repeated tag the later map wins.
    """

    def __init__(self, *type_maps: TypeMap) -> None:
        self._decoders: Dict[str, Decoder] = {}
        for type_map in type_maps:
            self.merge(type_map)

    def register(self, type_tag: str, decoder: Any) -> None:
        """
        Register decoder for a type tag.

        Args:
            type_tag: StandardAction.type of the typed action
            decoder: Callable (standard_action) -> action, or a
                StandardActionConvertible subclass
        """
        self._decoders[type_tag] = _as_decoder(decoder)

    def merge(self, other: Union["TypeRegistry", TypeMap]) -> None:
        """Merge another registry or mapping into this one (other wins)."""
        if isinstance(other, TypeRegistry):
            self._decoders.update(other._decoders)
            return
        for type_tag, decoder in other.items():
            self.register(type_tag, decoder)

    def decode(self, action: StandardAction) -> Any:
        """
        Rebuild the action a StandardAction was recorded from.

        Untyped actions are returned as-is.

        Raises:
            UnregisteredActionTypeError: If a typed action's tag has no decoder
        """
        if not action.is_typed_action:
            return action

        decoder = self._decoders.get(action.type)
        if decoder is None:
            raise UnregisteredActionTypeError(
                f"No decoder registered for typed action: {action.type}"
            )
        return decoder(action)

    def tags(self) -> List[str]:
        return sorted(self._decoders)

    def __contains__(self, type_tag: object) -> bool:
        return type_tag in self._decoders

    def __len__(self) -> int:
        return len(self._decoders)
