"""
Allow running the demonstration as a module:

    python -m ivalgebra

Delegates to ivalgebra.demo:main().
"""
import sys

from .demo import main

sys.exit(main())
