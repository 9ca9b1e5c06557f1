"""Plugin data objects and their payload codec contract.

A data object knows how to turn its own state into a plain payload
mapping and how to populate itself from one. Storage components only
move those payloads between memory and disk.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import copy
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping

from core.errors import PlugstoreConfigError, PlugstoreError
from core.types import PluginDataHolder

if TYPE_CHECKING:
    from store.data_storage import PluginDataStorage

PayloadDecoder = Callable[[object], object]


class PluginData(ABC):
    """Named, self-serializing configuration object owned by a holder."""

    def __init__(self, save_name: str) -> None:
        self._save_name = save_name
        self._holder: PluginDataHolder | None = None
        self._storage: PluginDataStorage | None = None

    @property
    def save_name(self) -> str:
        """Stable name of the file this object persists to."""
        return self._save_name

    @property
    def holder(self) -> PluginDataHolder | None:
        """Holder bound by the last ``on_init`` call, if any."""
        return self._holder

    @property
    def property_count(self) -> int:
        """Number of top-level properties in the encoded payload."""
        return len(self.encode_payload())

    def on_init(self, holder: PluginDataHolder, storage: PluginDataStorage) -> None:
        """Bind this object to its holder and storage before first decode.

        Args:
            holder: Owner of this data object.
            storage: Storage instance that loads and stores this object.
        """
        self._holder = holder
        self._storage = storage

    def save(self) -> None:
        """Store current state through the storage this object is bound to.

        Raises:
            PlugstoreError: If the object was never loaded through a storage.
        """
        if self._holder is None or self._storage is None:
            raise PlugstoreError(
                f"Plugin data '{self._save_name}' is not bound to a storage. "
                "Load it through a PluginDataStorage before calling save()."
            )
        self._storage.store(self._holder, self)

    @abstractmethod
    def encode_payload(self) -> dict[str, Any]:
        """Return the serializable representation of current state."""

    @abstractmethod
    def decode_payload(self, payload: Mapping[str, Any]) -> None:
        """Populate state in place from a decoded payload.

        Implementations must ignore keys they do not know.
        """


@dataclass
class ValueNode:
    """One declared, persisted property of an ``AbstractPluginData``.

    Attributes:
        name: Payload key of the property.
        value: Current in-memory value.
        decoder: Optional converter applied to raw decoded values.
    """

    name: str
    value: Any
    decoder: PayloadDecoder | None = None

    def decode(self, raw_value: object) -> Any:
        """Convert a raw decoded payload entry without assigning it."""
        return self.decoder(raw_value) if self.decoder is not None else raw_value


class AbstractPluginData(PluginData):
    """Plugin data built from explicitly declared value nodes.

    Subclasses declare their properties in ``__init__``::

        class GreeterSettings(AbstractPluginData):
            def __init__(self) -> None:
                super().__init__("settings")
                self.greeting = self.value("greeting", "hello")

    Properties are encoded in declaration order. Unknown payload keys
    are ignored on decode and missing keys keep their current value.
    """

    def __init__(self, save_name: str) -> None:
        super().__init__(save_name)
        self._value_nodes: dict[str, ValueNode] = {}

    @property
    def value_nodes(self) -> tuple[ValueNode, ...]:
        """Declared value nodes in declaration order."""
        return tuple(self._value_nodes.values())

    @property
    def property_count(self) -> int:
        return len(self._value_nodes)

    def value(self, name: str, default: Any, decoder: PayloadDecoder | None = None) -> ValueNode:
        """Declare a persisted property.

        Args:
            name: Payload key of the property.
            default: Initial value, deep-copied into the node.
            decoder: Optional converter for raw decoded values.

        Returns:
            The declared node; read and write ``node.value``.

        Raises:
            PlugstoreConfigError: If ``name`` is already declared.
        """
        if name in self._value_nodes:
            raise PlugstoreConfigError(
                f"Property '{name}' is declared twice in plugin data '{self.save_name}'. "
                "Give each property a unique name."
            )
        node = ValueNode(name=name, value=copy.deepcopy(default), decoder=decoder)
        self._value_nodes[name] = node
        return node

    def encode_payload(self) -> dict[str, Any]:
        return {node.name: node.value for node in self._value_nodes.values()}

    def decode_payload(self, payload: Mapping[str, Any]) -> None:
        decoded_values: dict[str, Any] = {}
        for name, raw_value in payload.items():
            node = self._value_nodes.get(name)
            if node is None:
                continue
            decoded_values[name] = node.decode(raw_value)
        for name, decoded_value in decoded_values.items():
            self._value_nodes[name].value = decoded_value


class MappingPluginData(PluginData):
    """Schema-less plugin data that keeps its payload mapping verbatim."""

    def __init__(self, save_name: str, values: Mapping[str, Any] | None = None) -> None:
        super().__init__(save_name)
        self.values: dict[str, Any] = dict(values or {})

    def encode_payload(self) -> dict[str, Any]:
        return dict(self.values)

    def decode_payload(self, payload: Mapping[str, Any]) -> None:
        self.values = dict(payload)
