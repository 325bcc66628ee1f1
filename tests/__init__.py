"""Tests for :mod:`radixtree`."""
