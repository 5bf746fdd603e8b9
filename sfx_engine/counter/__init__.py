from sfx_engine.counter.clicks import ClickStore, InvalidIncrement, MAX_INCREMENT, parse_increment

__all__ = ["ClickStore", "InvalidIncrement", "MAX_INCREMENT", "parse_increment"]
