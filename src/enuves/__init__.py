"""Bank statement reconciliation: PDF import, classification and ledger CSV export."""

__version__ = "0.1.0"


def __getattr__(name):
    # cli.main imports every command module; only load it when asked for
    if name == "main":
        from enuves.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
