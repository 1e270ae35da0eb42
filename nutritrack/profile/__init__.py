# -*- coding: utf-8 -*-
"""Profile — body metrics and daily energy needs."""
