"""
Controllers Package

Contains the terminal shell that drives a game session.
"""

from .terminal_controller import TerminalController, render_board, render_keyboard, render_result

__all__ = ['TerminalController', 'render_board', 'render_keyboard', 'render_result']
