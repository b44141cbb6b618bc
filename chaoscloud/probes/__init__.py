"""
Chaos 'probes' module.

Probes gather the current status of cloud provider resources. They are
read-only and return a mapping keyed by resource identifier.
"""
