"""Terminal context management."""

from contextlib import contextmanager


@contextmanager
def managed_terminal(term, state_manager):
    """Context manager for fullscreen, cbreak mode with a hidden cursor."""
    state_manager.save_state()
    try:
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            yield
    finally:
        # Ensure terminal is restored when exiting the context
        if not state_manager.terminal_restored:
            state_manager.restore_terminal()
