"""
Shared pytest configuration for the Noteful test suites

The named environment is forced to "test" here, before any application
module is imported, so no fixture or route ever resolves the development
database.
"""

import os

os.environ["ENV"] = "test"
