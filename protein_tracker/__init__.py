# -*- coding: utf-8 -*-
"""Protein-powder intake tracker."""
