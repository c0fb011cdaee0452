"""Selector schemas for the cloud resources the CLI lists.

Each factory returns a :class:`~cumulus_ui.tui.system.models.Schema` describing
columns, search fields and the detail panel for one record type.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Sequence, TypeVar

from cumulus_ui.resources.models import (
    VM,
    VPC,
    AutoScalingGroup,
    AWSProfile,
    ContextEntry,
    Instance,
    LoadBalancer,
)
from cumulus_ui.tui.core.theme import provider_tag, state_label, state_tag
from cumulus_ui.tui.system.models import Action, Column, DetailField, Schema

T = TypeVar("T")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

START_ACTION = Action("c-s", "start", "^S:start")
STOP_ACTION = Action("c-x", "stop", "^X:stop")


def optional(value: str | None) -> str:
    return value if value else "-"


def timestamp(value: datetime | None) -> str:
    if value is None:
        return "-"
    return value.strftime(TIMESTAMP_FORMAT)


def current_index(items: Sequence[T], is_current: Callable[[T], bool]) -> int:
    """Index of the first current item, or 0 so the cursor starts at the top."""
    for index, item in enumerate(items):
        if is_current(item):
            return index
    return 0


# VMs


def _vm_details(vm: VM) -> list[DetailField]:
    group_label = "IG:" if vm.provider == "gcp" else "ASG:"
    return [
        DetailField("ID:", vm.id, "id"),
        DetailField("Name:", vm.name, "name"),
        DetailField("State:", state_label(vm.state), state_tag(vm.state)),
        DetailField("Type:", vm.type, "type"),
        DetailField("Zone:", vm.zone, "zone"),
        DetailField("Private IP:", vm.private_ip, "ip"),
        DetailField("Public IP:", optional(vm.public_ip), "ip"),
        DetailField(group_label, optional(vm.asg), "group"),
        DetailField("Launched:", timestamp(vm.launched_at), "muted"),
        DetailField("Provider:", vm.provider, provider_tag(vm.provider)),
    ]


def vm_schema() -> Schema[VM]:
    """Connect-or-manage selector: Enter connects, ^S starts and ^X stops a VM."""
    return Schema(
        columns=(
            Column("ID", 21, lambda vm: vm.id, "id"),
            Column("STATE", 10, lambda vm: vm.state, lambda vm: state_tag(vm.state)),
            Column("TYPE", 12, lambda vm: vm.type, "type"),
            Column("ZONE", 16, lambda vm: vm.zone, "zone"),
            Column("NAME", 10, lambda vm: vm.name, "name", flexible=True),
        ),
        search_fields=lambda vm: (vm.name, vm.id, vm.private_ip, vm.type, vm.zone),
        detail_fields=_vm_details,
        actions=(START_ACTION, STOP_ACTION),
        title="VM Details",
        noun="VMs",
        empty_message="No VMs found",
        default_action="connect",
        default_label="Enter:connect",
        detail_height=10,
    )


# Instances


def instance_schema() -> Schema[Instance]:
    return Schema(
        columns=(
            Column("NAME", 10, lambda inst: inst.name, "name", flexible=True),
            Column("ID", 21, lambda inst: inst.id, "id"),
            Column("PRIVATE IP", 15, lambda inst: inst.private_ip, "ip"),
            Column("ASG", 20, lambda inst: inst.asg, "group"),
        ),
        search_fields=lambda inst: (inst.name, inst.id, inst.private_ip, inst.asg),
        detail_fields=lambda inst: [
            DetailField("Name:", inst.name, "name"),
            DetailField("ID:", inst.id, "id"),
            DetailField("Private IP:", inst.private_ip, "ip"),
            DetailField("Type:", inst.type, "type"),
            DetailField("AZ:", inst.az, "zone"),
            DetailField("ASG:", optional(inst.asg), "group"),
        ],
        title="Instance Details",
        noun="instances",
        empty_message="No instances found",
        default_action="connect",
        default_label="Enter:connect",
        detail_height=6,
    )


# Auto Scaling Groups


def _capacity(asg: AutoScalingGroup) -> str:
    return f"{asg.desired_capacity}/{asg.min_size}/{asg.max_size}"


def _asg_details(asg: AutoScalingGroup) -> list[DetailField]:
    return [
        DetailField("Name:", asg.name, "name"),
        DetailField("Launch Template:", optional(asg.launch_template), "name"),
        DetailField(
            "Desired/Min/Max:",
            f"{asg.desired_capacity} / {asg.min_size} / {asg.max_size}",
            "name",
        ),
        DetailField("Running:", f"{asg.instance_count} instances", "name"),
        DetailField("Healthy:", f"{asg.healthy_count} / {asg.instance_count}", "name"),
        DetailField("Status:", asg.status, state_tag(asg.status)),
        DetailField("AZs:", ", ".join(asg.azs), "zone"),
    ]


def asg_schema() -> Schema[AutoScalingGroup]:
    return Schema(
        columns=(
            Column("NAME", 10, lambda asg: asg.name, "name", flexible=True),
            Column("CAPACITY", 12, _capacity, "type"),
            Column("RUNNING", 10, lambda asg: f"{asg.instance_count} running", "ip"),
        ),
        search_fields=lambda asg: (asg.name,),
        detail_fields=_asg_details,
        title="ASG Details",
        noun="ASGs",
        empty_message="No ASGs found",
        detail_height=7,
        detail_label_width=18,
    )


# Load balancers


def lb_state_tag(state: str) -> str:
    lowered = state.strip().lower()
    if lowered == "active":
        return "running"
    if lowered in ("provisioning", "active_impaired"):
        return "pending"
    if lowered == "failed":
        return "stopped"
    return "muted"


def load_balancer_schema() -> Schema[LoadBalancer]:
    return Schema(
        columns=(
            Column("NAME", 10, lambda lb: lb.name, "name", flexible=True),
            Column("TYPE", 12, lambda lb: lb.type, "type"),
            Column("STATE", 10, lambda lb: lb.state, lambda lb: lb_state_tag(lb.state)),
        ),
        search_fields=lambda lb: (lb.name, lb.dns_name, lb.type),
        detail_fields=lambda lb: [
            DetailField("Name:", lb.name, "name"),
            DetailField("Type:", lb.type, "type"),
            DetailField("Scheme:", lb.scheme, "muted"),
            DetailField("State:", lb.state, lb_state_tag(lb.state)),
            DetailField("DNS:", lb.dns_name, "ip"),
            DetailField("VPC:", lb.vpc_id, "id"),
            DetailField("AZs:", ", ".join(lb.azs), "zone"),
        ],
        title="Load Balancer Details",
        noun="load balancers",
        empty_message="No load balancers found",
        detail_height=7,
    )


# VPCs


def vpc_schema() -> Schema[VPC]:
    return Schema(
        columns=(
            Column("ID", 24, lambda vpc: vpc.id, "id"),
            Column("CIDR", 18, lambda vpc: vpc.cidr, "ip"),
            Column("NAME", 10, lambda vpc: vpc.name, "name", flexible=True),
        ),
        search_fields=lambda vpc: (vpc.name, vpc.id, vpc.cidr),
        detail_fields=lambda vpc: [
            DetailField("ID:", vpc.id, "id"),
            DetailField("Name:", vpc.name, "name"),
            DetailField("CIDR:", vpc.cidr, "ip"),
            DetailField("State:", vpc.state, state_tag(vpc.state)),
            DetailField("Default:", "Yes" if vpc.is_default else "No", "muted"),
            DetailField("Owner:", vpc.owner_id, "muted"),
        ],
        title="VPC Details",
        noun="VPCs",
        empty_message="No VPCs found",
        detail_height=6,
    )


# Contexts and profiles


def _current_name_tag(current: bool) -> str:
    return "running" if current else "name"


def context_schema() -> Schema[ContextEntry]:
    """Context switcher; the current context carries the ``*`` marker."""
    return Schema(
        columns=(
            Column(
                "NAME",
                10,
                lambda ctx: ctx.name,
                lambda ctx: _current_name_tag(ctx.current),
                flexible=True,
            ),
            Column(
                "PROVIDER",
                8,
                lambda ctx: ctx.provider.upper(),
                lambda ctx: provider_tag(ctx.provider),
            ),
            Column("CREDENTIAL", 24, lambda ctx: ctx.credential, "muted"),
            Column("REGION", 16, lambda ctx: optional(ctx.region), "zone"),
        ),
        search_fields=lambda ctx: (ctx.name,),
        detail_fields=lambda ctx: [
            DetailField("Context:", ctx.name, "name"),
            DetailField("Provider:", ctx.provider.upper(), provider_tag(ctx.provider)),
            DetailField(ctx.credential_label, ctx.credential, "muted"),
            DetailField("Region:", optional(ctx.region), "zone"),
        ],
        title="Context Details",
        noun="contexts",
        empty_message="No contexts found",
        marker=lambda ctx: ctx.current,
        detail_height=4,
    )


def profile_schema(active_profile: str = "") -> Schema[AWSProfile]:
    """Profile picker; ``active_profile`` is marked and highlighted."""

    def is_active(profile: AWSProfile) -> bool:
        return bool(active_profile) and profile.name == active_profile

    return Schema(
        columns=(
            Column(
                "NAME",
                10,
                lambda profile: profile.name,
                lambda profile: _current_name_tag(is_active(profile)),
                flexible=True,
            ),
            Column("REGION", 20, lambda profile: optional(profile.region), "muted"),
        ),
        search_fields=lambda profile: (profile.name, profile.region),
        detail_fields=lambda profile: [
            DetailField("Profile:", profile.name, "name"),
            DetailField("Region:", optional(profile.region), "zone"),
            DetailField("Source:", profile.source, "muted"),
        ],
        title="Profile Details",
        noun="profiles",
        empty_message="No profiles found",
        marker=is_active,
        visible_height=10,
        detail_height=3,
    )
