from kiln.storage.result import Result
from kiln.storage.trace import Trace

__all__ = ["Result", "Trace"]
