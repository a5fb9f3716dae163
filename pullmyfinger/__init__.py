# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
pullmyfinger - open GitHub pull requests from the current checkout
"""

from pullmyfinger.constants import VERSION

__version__ = VERSION
