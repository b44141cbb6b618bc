"""
chaoscloud module

This module contains:
 - actions that inject faults into cloud provider resources (actions
   directory)
 - probes that describe the current state of those resources (probes
   directory)
 - the describe-before-mutate guard shared by every action (guard.py)
 - helper functions (helpers.py file)
 - common files (common directory)
 - the channels used to reach Aliyun and AWS (execute directory)

Actions are meant to be composed into chaos experiments. Every action
describes the resource before changing it and executes the inverse operation
when the requested one is already satisfied. Running an action a second time
therefore recovers the fault the first run injected.

Supported resource kinds:
 - aliyun: ecs, disk, networkInterface, privateIp, publicIp, securityGroup,
   vSwitch
 - aws: ec2

Things to consider when adding or modifying actions and/or probes:
1. Actions and Probes could/may be used outside of Chaos experiments for other
   kinds of integration or systems testing. Therefore, actions should
   be written in a way they can reused outside of the context of the
   the chaoscloud module and the chaostoolkit.
2. A new resource kind is a new ResourceKind table. Do not add a new executor.
"""
