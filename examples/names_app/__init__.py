from .demo import (  # noqa: F401
    bootstrap_connection,
    fetch_names,
    run_demo,
    save_name,
)

__all__ = [
    "bootstrap_connection",
    "save_name",
    "fetch_names",
    "run_demo",
]
