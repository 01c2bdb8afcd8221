from .core import Dispatcher, DispatchReport, Settings, Writer, split_statements

__version__ = "0.1.0"

__all__ = ["Dispatcher", "DispatchReport", "Settings", "Writer", "split_statements"]
