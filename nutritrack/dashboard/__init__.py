# -*- coding: utf-8 -*-
"""Dashboard — daily calorie balance."""
