"""Session records, scrollback, tab titles, agent hook settings and tmux attach helpers."""

__version__ = "0.1.0"