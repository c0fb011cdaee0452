"""Plain records handed to the selector by the cloud listing commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class VM:
    """A virtual machine from any provider."""

    id: str
    name: str
    state: str
    private_ip: str = ""
    public_ip: str = ""
    type: str = ""
    zone: str = ""
    tags: dict[str, str] = field(default_factory=dict, compare=False, hash=False)
    launched_at: datetime | None = None
    provider: str = "aws"
    asg: str = ""

    @property
    def is_running(self) -> bool:
        return self.state == "running"


@dataclass(frozen=True)
class Instance:
    """An EC2 or GCE instance as listed by the connect command."""

    id: str
    name: str
    private_ip: str = ""
    public_ip: str = ""
    state: str = ""
    type: str = ""
    az: str = ""
    asg: str = ""
    launch_time: datetime | None = None
    cloud: str = "aws"


@dataclass(frozen=True)
class AutoScalingGroup:
    name: str
    arn: str = ""
    launch_template: str = ""
    desired_capacity: int = 0
    min_size: int = 0
    max_size: int = 0
    instance_count: int = 0
    healthy_count: int = 0
    unhealthy_count: int = 0
    status: str = ""
    created_time: datetime | None = None
    azs: tuple[str, ...] = ()


@dataclass(frozen=True)
class VPC:
    id: str
    name: str = ""
    cidr: str = ""
    state: str = ""
    is_default: bool = False
    owner_id: str = ""


@dataclass(frozen=True)
class LoadBalancer:
    name: str
    arn: str = ""
    dns_name: str = ""
    type: str = ""
    scheme: str = ""
    state: str = ""
    vpc_id: str = ""
    azs: tuple[str, ...] = ()
    created_at: datetime | None = None


@dataclass(frozen=True)
class AWSProfile:
    """An AWS CLI profile; ``source`` is ``credentials`` or ``config``."""

    name: str
    region: str = ""
    source: str = "config"


@dataclass(frozen=True)
class ContextEntry:
    """A saved cloud context as shown by the context switcher.

    AWS contexts carry a ``profile``, GCP contexts a ``project``.
    """

    name: str
    provider: str
    profile: str = ""
    project: str = ""
    region: str = ""
    current: bool = False

    @property
    def credential(self) -> str:
        return self.project or self.profile

    @property
    def credential_label(self) -> str:
        return "Project:" if self.project else "Profile:"
