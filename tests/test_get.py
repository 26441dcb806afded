import argparse
import io
import json

import pytest

from bbsctl.admin import AdminError
from bbsctl.get import add_parser, get_instances, get_tenants
from bbsctl.render import set_colors_enabled
from bbsctl.system import CommandError

URL = "http://localhost/bigbluebutton"
SECRET = "secret"
INSTANCES = [{"url": URL, "secret": SECRET}]
TENANTS = {
    "kind": "TenantList",
    "tenants": [{"hostname": "localhost", "instance_count": 1}],
}


class FakeAPI:
    def __init__(self, instances=None, tenants=None, error=None):
        self.instances = instances
        self.tenants = tenants
        self.error = error

    def list_instances(self):
        if self.error:
            raise self.error
        return self.instances

    def get_tenants(self):
        if self.error:
            raise self.error
        return self.tenants


@pytest.fixture(autouse=True)
def _no_colors():
    set_colors_enabled(False)
    yield
    set_colors_enabled(True)


def _parser():
    parser = argparse.ArgumentParser()
    add_parser(parser.add_subparsers())
    return parser


def test_get_instances_error():
    with pytest.raises(CommandError) as info:
        get_instances(FakeAPI(error=AdminError("admin error")), io.StringIO())
    assert str(info.value) == "an error occured when getting remote instances: admin error"


def test_get_instances_json():
    out = io.StringIO()
    get_instances(FakeAPI(instances=INSTANCES), out, as_json=True)
    assert json.loads(out.getvalue()) == INSTANCES
    assert out.getvalue().startswith("[\n  {")


def test_get_instances_csv():
    out = io.StringIO()
    get_instances(FakeAPI(instances=INSTANCES), out, as_csv=True)
    assert out.getvalue().strip() == f"Url,Secret\n{URL},{SECRET}"


def test_get_instances_table():
    out = io.StringIO()
    get_instances(FakeAPI(instances=INSTANCES), out)
    expected = f"Url                             Secret  \n{URL}  {SECRET}"
    assert out.getvalue().strip() == expected


def test_get_tenants_error():
    with pytest.raises(CommandError) as info:
        get_tenants(FakeAPI(error=AdminError("admin error")), io.StringIO())
    assert str(info.value) == "unable to fetch tenants: admin error"


def test_get_tenants_json():
    out = io.StringIO()
    get_tenants(FakeAPI(tenants=TENANTS), out, as_json=True)
    assert json.loads(out.getvalue()) == TENANTS["tenants"]


def test_get_tenants_csv():
    out = io.StringIO()
    get_tenants(FakeAPI(tenants=TENANTS), out, as_csv=True)
    assert out.getvalue().strip() == "Hostname,Instances\nlocalhost,1"


def test_get_tenants_table():
    out = io.StringIO()
    get_tenants(FakeAPI(tenants=TENANTS), out)
    assert out.getvalue().strip() == "Hostname   Instances  \nlocalhost          1"


def test_get_without_subcommand_prints_help():
    args = _parser().parse_args(["get"])
    out = io.StringIO()
    args.handler(args, FakeAPI(), out)
    assert "instances" in out.getvalue()
    assert "tenants" in out.getvalue()


def test_parser_wires_instances_json_flag():
    args = _parser().parse_args(["get", "instances", "-j"])
    out = io.StringIO()
    args.handler(args, FakeAPI(instances=INSTANCES), out)
    assert json.loads(out.getvalue()) == INSTANCES


def test_parser_wires_tenants_csv_flag():
    args = _parser().parse_args(["get", "tenants", "--csv"])
    out = io.StringIO()
    args.handler(args, FakeAPI(tenants=TENANTS), out)
    assert out.getvalue().strip() == "Hostname,Instances\nlocalhost,1"