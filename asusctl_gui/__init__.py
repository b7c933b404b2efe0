"""asusctl-gui: device-state layer for an ASUS laptop control panel."""

__version__ = "0.1.0"
