"""
Step definitions for DNS Zone Sync scenarios.
"""

from behave import given, then, when

from dns_zone_sync.core.dns_manager import DNSManager
from dns_zone_sync.parsers.zone_config import ZoneConfig
from dns_zone_sync.core.records import DeclaredRecord
from dns_zone_sync.providers.dns_client import DNSClient


def _as_bool(value):
    return value.strip().lower() == "true"


def _build_client(context):
    if not hasattr(context, "dns_client"):
        context.dns_client = DNSClient(
            {
                "default_provider": "mock",
                "dns_providers": {
                    "mock": {
                        "domain": context.domain,
                        "records": context.live_records,
                        "fail_on": context.fail_on,
                    }
                },
            }
        )
    return context.dns_client


@given('the zone "{domain}" is served by the mock provider')
def step_impl(context, domain):
    context.domain = domain


@given("the zone holds no records")
def step_impl(context):
    context.live_records = []


@given("the zone holds the following records")
def step_impl(context):
    context.live_records = [
        {
            "id": row["id"],
            "name": row["name"],
            "type": row["type"],
            "content": row["content"],
            "proxied": _as_bool(row["proxied"]),
        }
        for row in context.table
    ]


@given('the provider rejects changes to "{name}"')
def step_impl(context, name):
    context.fail_on.append(name)


@given("the config declares the following records")
def step_impl(context):
    context.declared = [
        DeclaredRecord(
            name=row["name"],
            type=row["type"],
            content=row["content"],
            proxied=_as_bool(row["proxy"]),
        )
        for row in context.table
    ]


@given("the config declares no records")
def step_impl(context):
    context.declared = []


@when("I sync the zone")
@when("I sync the zone again")
def step_impl(context):
    client = _build_client(context)
    dns_manager = DNSManager(client, output=context.console)
    zone_config = ZoneConfig(domain=context.domain, records=context.declared)
    context.results.append(dns_manager.sync(context.zone_id, zone_config))


@then("the zone holds the following records")
def step_impl(context):
    expected = {
        (row["name"], row["type"], row["content"], _as_bool(row["proxied"]))
        for row in context.table
    }
    actual = {
        (r.name, r.type, r.content, r.proxied)
        for r in context.dns_client.list_records(context.zone_id)
    }
    assert actual == expected, f"expected {expected}, got {actual}"


@then('the record "{record_id}" has content "{content}"')
def step_impl(context, record_id, content):
    records = {r.id: r for r in context.dns_client.list_records(context.zone_id)}
    assert records[record_id].content == content


@then('the record "{record_id}" no longer exists')
def step_impl(context, record_id):
    ids = {r.id for r in context.dns_client.list_records(context.zone_id)}
    assert record_id not in ids


@then('the record "{record_id}" still exists')
def step_impl(context, record_id):
    ids = {r.id for r in context.dns_client.list_records(context.zone_id)}
    assert record_id in ids


@then("{count:d} changes were applied")
def step_impl(context, count):
    assert context.results[-1].applied == count, context.results[-1].applied


@then("{count:d} changes failed")
def step_impl(context, count):
    assert context.results[-1].failures == count, context.results[-1].failures


@then("no changes were planned")
def step_impl(context):
    assert context.results[-1].plan.is_empty()
