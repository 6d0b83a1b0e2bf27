"""Application layer: Qt-free state, services and ports.

Author: Michael Economou
Date: 2026-10-03
"""
