"""Currency conversion service: cached exchange rates, conversion and formatting."""
