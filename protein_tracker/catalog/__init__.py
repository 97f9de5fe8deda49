# -*- coding: utf-8 -*-
"""Catalog domain (protein-powder product definitions).

Products are editable and user-extensible; the seed set ships with the app and
cannot be deleted.
"""
