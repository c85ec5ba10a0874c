"""Independent calls on one shared client must not see each other's responses."""

from concurrent.futures import ThreadPoolExecutor
import re

import responses

from incapsula._resources.roles import Roles
from tests.utils.assertions import assert_credentials

BASE = "https://api.test.incapsula"


def _echo_role(request):
    role_id = int(re.search(r"/roles/(\d+)", request.url).group(1))
    return 200, {}, f'{{"roleId": {role_id}, "roleName": "Role {role_id}"}}'


@responses.activate
def test_parallel_reads_do_not_cross(http):
    responses.add_callback(
        responses.GET,
        re.compile(rf"{re.escape(BASE)}/user-management/v1/roles/\d+"),
        callback=_echo_role,
        content_type="application/json",
    )
    roles = Roles(http)
    ids = list(range(1, 65))

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(roles.get, ids))

    assert [r.role_id for r in results] == ids
    assert [r.role_name for r in results] == [f"Role {i}" for i in ids]
    assert len(responses.calls) == len(ids)
    for call in responses.calls:
        assert_credentials(call.request.url)
