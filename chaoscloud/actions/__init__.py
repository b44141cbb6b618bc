"""
Chaos 'actions' module.

This module contains *actions* that modify the state of cloud provider
resources (instances, disks, network interfaces, IP addresses, security groups
and vSwitches).

An *action* performs exactly one read-only probe followed by at most one
mutating call. It never waits for the resource to reach its final state, and
a succeeded *action* only means the provider accepted the call.

Faults, failures, and exceptions encountered while executing an *action* are
reported in the returned Response and logged. They are never retried.
"""
