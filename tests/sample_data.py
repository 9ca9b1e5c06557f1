"""Plugin data objects shared by storage tests."""

from __future__ import annotations

from store.payload_codec import mapping_from_payload
from store.plugin_data import AbstractPluginData


class GreeterSettings(AbstractPluginData):
    """Settings of a fictional greeter plugin."""

    def __init__(self, save_name: str = "settings") -> None:
        super().__init__(save_name)
        self.greeting = self.value("greeting", "hello")
        self.retries = self.value("retries", 3)
        self.channels = self.value("channels", ["general"])
        self.aliases = self.value("aliases", {}, decoder=mapping_from_payload)


class Unrepresentable:
    """Value no YAML or JSON encoder can represent."""
