from stream_doubles.pump import PumpResult, pump
from stream_doubles.repeat import RepeatReader
from stream_doubles.void import VoidWriter

__all__ = ["PumpResult", "RepeatReader", "VoidWriter", "pump"]
