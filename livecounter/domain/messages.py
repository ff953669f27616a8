"""Status messages shown by the counter screen."""

INCREMENTED = "incremented"
DECREMENTED = "decremented"
RESET = "reset"
LOADING = "loading data..."
BACKGROUND_UPDATED = "updated from background"

# Values written by the simulated asynchronous operations
FETCH_RESULT = 100
BACKGROUND_RESULT = 50


def fetch_complete(count: int) -> str:
    """Completion message for a simulated fetch."""
    return f"data loaded, new count: {count}"
