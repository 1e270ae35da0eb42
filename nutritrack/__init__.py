# -*- coding: utf-8 -*-
"""NutriTrack — calorie and exercise tracking backend."""

__version__ = "1.0.0"
