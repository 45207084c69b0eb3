from unittest import TestCase

from mock import Mock
from parameterized import parameterized

from global_bin_dir.environment import Environment, search_path_name


class TestSearchPathName(TestCase):
    def test_is_path_outside_windows(self):
        self.assertEqual(search_path_name({"Path": "/a"}, False), "PATH")

    def test_is_looked_up_case_insensitively_on_windows(self):
        self.assertEqual(search_path_name({"Path": "C:\\a", "HOME": "C:\\z"}, True), "Path")

    def test_defaults_to_path_on_windows(self):
        self.assertEqual(search_path_name({}, True), "PATH")


class TestEnvironment(TestCase):
    def setUp(self):
        self.osutils = Mock()
        self.osutils.environ = {"PATH": "/a:/b", "PNPM_HOME": "/home/z/.pnpm"}
        self.osutils.is_windows.return_value = False
        self.osutils.exec_path = "/usr/bin/python3"
        self.osutils.path_delimiter = ":"

    def test_from_os_reads_the_process_facts(self):
        environment = Environment.from_os(self.osutils)

        self.assertEqual(environment.search_path, "/a:/b")
        self.assertEqual(environment.exec_path, "/usr/bin/python3")
        self.assertEqual(environment.pnpm_home, "/home/z/.pnpm")
        self.assertEqual(environment.delimiter, ":")
        self.assertEqual(environment.path_name, "PATH")
        self.assertEqual(environment.exec_dir(), "/usr/bin")

    def test_from_os_prefers_an_explicit_pnpm_home(self):
        environment = Environment.from_os(self.osutils, pnpm_home="/opt/pnpm")

        self.assertEqual(environment.pnpm_home, "/opt/pnpm")

    def test_from_os_without_path(self):
        self.osutils.environ = {}

        environment = Environment.from_os(self.osutils)

        self.assertIsNone(environment.search_path)
        self.assertIsNone(environment.pnpm_home)

    def test_from_os_on_windows(self):
        self.osutils.environ = {"Path": "C:\\a;C:\\b"}
        self.osutils.is_windows.return_value = True
        self.osutils.path_delimiter = ";"

        environment = Environment.from_os(self.osutils)

        self.assertEqual(environment.search_path, "C:\\a;C:\\b")
        self.assertEqual(environment.path_name, "Path")
        self.assertEqual(environment.sep, "\\")

    @parameterized.expand(
        [
            ("/a/b/", "/a/b"),
            ("/a/b//", "/a/b"),
            ("/a/b", "/a/b"),
            ("/", "/"),
            ("//", "/"),
        ]
    )
    def test_normalize_posix(self, path, expected):
        environment = Environment(search_path="", exec_path="/usr/bin/python3")

        self.assertEqual(environment.normalize(path), expected)

    @parameterized.expand(
        [
            ("C:\\Program Files\\NodeJS\\", "c:\\program files\\nodejs"),
            ("C:/Tools/", "c:/tools"),
            ("C:\\", "c:\\"),
        ]
    )
    def test_normalize_windows(self, path, expected):
        environment = Environment(search_path="", exec_path="C:\\Python\\python.exe", is_windows=True)

        self.assertEqual(environment.normalize(path), expected)

    def test_same_dir(self):
        environment = Environment(search_path="", exec_path="/usr/bin/python3")

        self.assertTrue(environment.same_dir("/a/b/", "/a/b"))
        self.assertFalse(environment.same_dir("/a/B", "/a/b"))
        self.assertFalse(environment.same_dir("/a/b", None))

    def test_split_segments(self):
        posix = Environment(search_path="", exec_path="/usr/bin/python3")
        windows = Environment(search_path="", exec_path="C:\\Python\\python.exe", is_windows=True)

        self.assertEqual(posix.split_segments("/home/z/.npm/"), ["home", "z", ".npm"])
        self.assertEqual(windows.split_segments("C:\\Users/z\\npm"), ["C:", "Users", "z", "npm"])
