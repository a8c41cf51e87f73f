"""Command-line utilities (sort, grep, cut, wget, telnet, shell, NTP time, calendar server), text helpers and design-pattern examples."""

__version__ = "0.1.0"