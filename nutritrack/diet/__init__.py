# -*- coding: utf-8 -*-
"""Diet — food diary entries."""
