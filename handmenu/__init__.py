"""Launcher menu logic for handheld devices: file browsing, input mapping, hotkeys, layout, text and an on-screen keyboard."""

__version__ = "0.1.0"