"""Ray tracing kit. Currently just homogeneous point/vector tuples."""
from .tuples import *
