from dataclasses import dataclass


@dataclass
class ResolverConfig:
    # Inventory
    giveaway_strategy: str = "most_stocked"

    # Display mode (hours on a 24h clock)
    day_start_hour: int = 6
    night_start_hour: int = 18

    # Logging
    log_level: str = "WARNING"
