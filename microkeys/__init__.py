"""Key events, key-binding trees and command-bar completion for a text editor."""

__version__ = "0.1.0"
__all__ = ["events", "infocomplete", "keytree"]