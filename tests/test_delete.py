import argparse
import io

import pytest

from bbsctl.admin import AdminError
from bbsctl.delete import add_parser, delete_tenant
from bbsctl.system import CommandError


class FakeAdmin:
    def __init__(self, error=None):
        self.error = error
        self.deleted = []

    def delete_tenant(self, hostname):
        if self.error is not None:
            raise self.error
        self.deleted.append(hostname)


def test_missing_hostname():
    api = FakeAdmin()
    with pytest.raises(CommandError, match="hostname not found in arguments"):
        delete_tenant(api, None, io.StringIO())
    assert api.deleted == []


def test_admin_error_is_returned():
    with pytest.raises(AdminError) as info:
        delete_tenant(FakeAdmin(AdminError("admin error")), "localhost", io.StringIO())
    assert str(info.value) == "admin error"


def test_valid_delete():
    api = FakeAdmin()
    out = io.StringIO()
    delete_tenant(api, "localhost", out)
    assert out.getvalue().strip() == "Tenant localhost successfully deleted"
    assert api.deleted == ["localhost"]


def _parser():
    parser = argparse.ArgumentParser()
    add_parser(parser.add_subparsers())
    return parser


def test_parser_delete_tenant():
    args = _parser().parse_args(["delete", "tenant", "localhost"])
    api = FakeAdmin()
    out = io.StringIO()
    args.handler(args, api, out)
    assert api.deleted == ["localhost"]


def test_parser_delete_tenant_without_hostname():
    args = _parser().parse_args(["delete", "tenant"])
    with pytest.raises(CommandError):
        args.handler(args, FakeAdmin(), io.StringIO())


def test_parser_delete_alone_prints_help():
    args = _parser().parse_args(["delete"])
    out = io.StringIO()
    args.handler(args, FakeAdmin(), out)
    assert "tenant" in out.getvalue()
    assert "Delete a specific resource" in out.getvalue()