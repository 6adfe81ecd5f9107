#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tokenlab/__init__.py

__version__ = "0.1.0"
