# -*- coding: utf-8 -*-
"""Auth — credentials, sessions and the user table."""
