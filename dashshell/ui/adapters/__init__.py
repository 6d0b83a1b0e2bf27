"""Qt adapters implementing the application ports.

Author: Michael Economou
Date: 2026-10-06
"""
