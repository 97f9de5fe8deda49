# -*- coding: utf-8 -*-
"""Intake domain (per-product quantities for the current day).

Entries are created by reconciling against the catalog, never directly.
"""
