# -*- coding: utf-8 -*-
"""Exercise domain (exercise log)."""
