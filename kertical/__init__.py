"""Models for ExternalProxy and PortForwarding resources and webhook matching helpers."""

__version__ = "0.1.0"