"""
Entities - Domain Instances

🎯 The domain objects that controllers iterate over.
"""

from .instance import Instance, InstanceCollection

__all__ = ["Instance", "InstanceCollection"]
