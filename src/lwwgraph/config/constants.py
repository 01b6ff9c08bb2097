DEFAULTS = {
    # Whether new replicas are directed graphs
    "DIRECTED": False,
    # Raise on rejected operations instead of logging and returning a failure
    "STRICT": False,
    # Default timestamp source: "wall" (epoch millis) or "logical" (counter)
    "CLOCK": "wall",
    # First reading of the logical clock
    "LOGICAL_CLOCK_START": 0,
}
