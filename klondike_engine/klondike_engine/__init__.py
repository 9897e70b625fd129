"""Klondike solitaire game engine."""
