"""
CityTeam Guests: mat registration backend for shelter facilities.
"""

__version__ = "0.1.0"
