"""Record types and selector schemas for cloud resources."""

from cumulus_ui.resources.models import (
    VM,
    VPC,
    AutoScalingGroup,
    AWSProfile,
    ContextEntry,
    Instance,
    LoadBalancer,
)
from cumulus_ui.resources.schemas import (
    asg_schema,
    context_schema,
    current_index,
    instance_schema,
    load_balancer_schema,
    profile_schema,
    vm_schema,
    vpc_schema,
)

__all__ = [
    "VM",
    "VPC",
    "AutoScalingGroup",
    "AWSProfile",
    "ContextEntry",
    "Instance",
    "LoadBalancer",
    "asg_schema",
    "context_schema",
    "current_index",
    "instance_schema",
    "load_balancer_schema",
    "profile_schema",
    "vm_schema",
    "vpc_schema",
]
