"""
Tests for the index-based plug-in resource: link, search and status checks.
"""

import unittest
from concurrent.futures import ThreadPoolExecutor

from scm_index.discovery import IndexEntry
from scm_index.errors import AdminAccessDenied, RepositoryUnreachable
from scm_index.extraction.index_parser import parse_entries
from scm_index.extraction.status import revision_from_index
from scm_index.network.client import ProbeResult
from scm_index.pagination import InMemoryPagination
from scm_index.params import StaticParameterResolver
from scm_index.resource import IndexBasedPluginResource, SubscriptionStatusWithData
from scm_index.utils.url import with_trailing_slash


BASE = "http://localhost:8120"
NODE = "service:impl:node"

INDEX_HTML = """<html><head><title>Index of /</title></head><body><ul>
<li><a href="/">/</a></li>
<li><a href="has-event/">has-event/</a></li>
<li><a href="other/">other/</a></li>
</ul></body></html>"""

REPO_HTML = """<html><head><title>my-repo - Revision 42: /</title></head><body>
<a href="trunk/">trunk/</a></body></html>"""


class FakeProbe:
    """Serve canned results per URL; anything else is unreachable."""

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.calls = []

    def probe(self, url, user=None, password=None):
        self.calls.append((url, user, password))
        if url in self.pages:
            return ProbeResult(True, self.pages[url])
        return ProbeResult(False)


class ResourceTestCase(unittest.TestCase):
    def setUp(self):
        self.parameters = {
            "service:url": BASE,
            "service:user": "user",
            "service:password": "secret",
            "service:index": "true",
            "service:repository": "my-repo",
        }
        self.probe = FakeProbe()
        self.resource = self._resource()

    def _resource(self, **kwargs):
        resolver = StaticParameterResolver({1: self.parameters}, {NODE: self.parameters})
        return IndexBasedPluginResource(
            "service", "impl", resolver=resolver, probe=self.probe, **kwargs
        )

    def serve_repository(self, body=REPO_HTML):
        self.probe.pages[BASE + "/my-repo"] = body

    def serve_root(self, body=INDEX_HTML):
        self.probe.pages[BASE + "/"] = body


class TestKeys(ResourceTestCase):
    def test_get_key(self):
        self.assertEqual(self.resource.get_key(), "service")

    def test_get_last_version(self):
        self.assertIsNone(self.resource.get_last_version())

    def test_collaborators_read_only(self):
        for name in ("names", "probe", "simple_name"):
            with self.subTest(name=name), self.assertRaises(AttributeError):
                setattr(self.resource, name, None)
        self.assertIs(self.resource.probe, self.probe)
        self.assertEqual(self.resource.names.url, "service:url")

    def test_repository_url_hook(self):
        resource = self._resource(repository_url=with_trailing_slash())
        self.assertEqual(resource.get_repository_url(self.parameters), BASE + "/my-repo/")


class TestLink(ResourceTestCase):
    def test_link(self):
        self.serve_repository()
        self.resource.link(1)
        self.assertEqual(self.probe.calls, [(BASE + "/my-repo", "user", "secret")])

    def test_link_does_not_check_admin(self):
        self.serve_repository()
        self.resource.link(1)
        self.assertNotIn(BASE + "/", [url for url, _, _ in self.probe.calls])

    def test_link_not_found(self):
        self.serve_repository()
        self.parameters["service:repository"] = "missing-repo"
        with self.assertRaises(RepositoryUnreachable) as ctx:
            self.resource.link(1)
        self.assertEqual(ctx.exception.parameter, "service:repository")
        self.assertEqual(ctx.exception.rule, "impl-repository")
        self.assertEqual(ctx.exception.value, "missing-repo")


class TestCheckSubscriptionStatus(ResourceTestCase):
    def test_default_data_is_page(self):
        self.serve_repository()
        status = self.resource.check_subscription_status(self.parameters)
        self.assertTrue(status.is_up)
        self.assertEqual(status.data["info"], REPO_HTML)

    def test_to_data_hook(self):
        self.serve_repository()
        resource = self._resource(to_data=revision_from_index)
        status = resource.check_subscription_status(self.parameters)
        self.assertEqual(status.data, {"info": 42})

    def test_to_data_default_identity(self):
        self.assertEqual(self.resource.to_data("some"), "some")

    def test_unreachable(self):
        with self.assertRaises(RepositoryUnreachable):
            self.resource.check_subscription_status(self.parameters)

    def test_put(self):
        status = SubscriptionStatusWithData()
        status.put("info", 1)
        self.assertEqual(status.data, {"info": 1})


class TestCheckStatus(ResourceTestCase):
    def test_admin_listing(self):
        self.serve_root()
        self.assertTrue(self.resource.check_status(self.parameters))
        self.assertEqual(self.probe.calls, [(BASE + "/", "user", "secret")])

    def test_admin_not_found(self):
        with self.assertRaises(AdminAccessDenied) as ctx:
            self.resource.check_status(self.parameters)
        self.assertEqual(ctx.exception.parameter, "service:url")
        self.assertEqual(ctx.exception.rule, "impl-admin")
        self.assertEqual(ctx.exception.value, "user")

    def test_admin_invalid_index(self):
        self.serve_root("<html>some</html>")
        with self.assertRaises(AdminAccessDenied):
            self.resource.check_status(self.parameters)

    def test_no_index(self):
        self.parameters["service:index"] = "false"
        self.assertTrue(self.resource.check_status(self.parameters))
        self.assertEqual(self.probe.calls, [])

    def test_capitalised_index_flag_skips(self):
        self.parameters["service:index"] = "True"
        self.assertTrue(self.resource.check_status(self.parameters))
        self.assertEqual(self.probe.calls, [])

    def test_not_http(self):
        self.parameters["service:url"] = "custom://host"
        self.assertTrue(self.resource.check_status(self.parameters))
        self.assertEqual(self.probe.calls, [])


class TestFindAllByName(ResourceTestCase):
    def test_find(self):
        self.serve_root()
        projects = self.resource.find_all_by_name(NODE, "has-")
        self.assertEqual(projects, [IndexEntry("has-event", "has-event")])

    def test_find_accent_and_case_insensitive(self):
        self.serve_root()
        projects = self.resource.find_all_by_name(NODE, "HAS-ÉVÉ")
        self.assertEqual([p.id for p in projects], ["has-event"])

    def test_substring_not_prefix(self):
        self.serve_root()
        self.assertEqual([p.name for p in self.resource.find_all_by_name(NODE, "vent")], ["has-event"])

    def test_no_listing(self):
        self.assertEqual(self.resource.find_all_by_name(NODE, "as-"), [])

    def test_empty_listing(self):
        self.serve_root("")
        self.assertEqual(self.resource.find_all_by_name(NODE, "as-"), [])

    def test_unknown_node(self):
        self.assertEqual(self.resource.find_all_by_name("unknown", "as-"), [])

    def test_uses_node_credentials(self):
        self.serve_root()
        self.resource.find_all_by_name(NODE, "x")
        self.assertEqual(self.probe.calls, [(BASE + "/", "user", "secret")])

    def test_first_page_in_listing_order(self):
        names = [f"repo-{i:02d}" for i in range(25)]
        self.serve_root("".join(f'<a href="{name}/">{name}</a>' for name in reversed(names)))
        projects = self.resource.find_all_by_name(NODE, "repo")
        self.assertEqual(len(projects), 10)
        self.assertEqual([p.id for p in projects], list(reversed(names))[:10])

    def test_result_is_subsequence_of_listing(self):
        html = '<a href="a-1/"><a href="b/"><a href="a-2/"><a href="c/"><a href="a-3/">'
        self.serve_root(html)
        found = [p.id for p in self.resource.find_all_by_name(NODE, "a")]
        entries = parse_entries(html)
        positions = [entries.index(name) for name in found]
        self.assertEqual(positions, sorted(positions))
        self.assertEqual(found, ["a-1", "a-2", "a-3"])

    def test_custom_pagination(self):
        class SmallPages(InMemoryPagination):
            def new_page(self, items, page_index=0, page_size=10):
                return super().new_page(items, page_index, 1)

        self.serve_root()
        resource = self._resource(pagination=SmallPages())
        self.assertEqual(len(resource.find_all_by_name(NODE, "")), 1)


class TestConcurrentCalls(ResourceTestCase):
    def test_shared_instance(self):
        self.serve_root()
        self.serve_repository()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(
                lambda _: (
                    self.resource.check_status(self.parameters),
                    self.resource.find_all_by_name(NODE, "other"),
                ),
                range(32),
            ))
        self.assertTrue(all(r == (True, [IndexEntry("other", "other")]) for r in results))


if __name__ == "__main__":
    unittest.main()
