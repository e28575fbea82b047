"""
Tests for the PyPI release plugin surface: metadata, hook dispatch and the
aggregating validate entry point.
"""

import json
import socket

import pytest

from pypublish import __version__
from pypublish.upload.exceptions import CommandFailedError
from pypublish.upload.plugin import ExecuteRequest, Hook, PublishPlugin, ReleaseContext


class TestGetInfo:
    """Test cases for plugin metadata"""

    def test_info(self):
        """Test name, version, hooks and schema"""
        info = PublishPlugin(env_lookup={}.get).get_info()

        assert info.name == "pypi"
        assert info.version == __version__
        assert info.description == "Publish packages to PyPI (Python Package Index)"
        assert info.hooks == [Hook.POST_PUBLISH]

        schema = json.loads(info.config_schema)
        assert schema["type"] == "object"
        assert set(schema["properties"]) == {
            "username", "password", "repository", "dist_path", "skip_existing"
        }
        assert schema["properties"]["repository"]["default"] == "https://upload.pypi.org/legacy/"
        assert schema["properties"]["dist_path"]["default"] == "dist/*"


class TestExecute:
    """Test cases for hook execution"""

    @pytest.fixture(autouse=True)
    def setup_plugin(self, make_executor, public_resolver):
        self.make_executor = make_executor
        self.resolver = public_resolver
        self.executor = make_executor(output=b"ok")
        self.plugin = PublishPlugin(executor=self.executor, resolver=public_resolver, env_lookup={}.get)

    @pytest.mark.parametrize("hook", [h for h in Hook if h != Hook.POST_PUBLISH])
    def test_unhandled_hooks(self, hook):
        """Test every other hook succeeds without doing anything"""
        response = self.plugin.execute(ExecuteRequest(
            hook=hook,
            config={"username": "u", "password": "p"},
            context=ReleaseContext(version="v1.0.0")
        ))

        assert response.success == True
        assert response.message == f"Hook {hook.value} not handled"
        assert self.executor.calls == []

    def test_dry_run(self):
        """Test the post-publish dry run scenario"""
        response = self.plugin.execute(ExecuteRequest(
            hook=Hook.POST_PUBLISH,
            config={"username": "u", "password": "p"},
            context=ReleaseContext(version="v1.2.3"),
            dry_run=True
        ))

        assert response.success == True
        assert "Would upload package" in response.message
        assert response.outputs["version"] == "1.2.3"
        assert self.executor.calls == []

    def test_dry_run_with_custom_repository(self):
        """Test the message names the configured repository"""
        response = self.plugin.execute(ExecuteRequest(
            hook=Hook.POST_PUBLISH,
            config={"username": "u", "password": "p", "repository": "https://test.pypi.org/legacy/"},
            context=ReleaseContext(version="v2.0.0"),
            dry_run=True
        ))

        assert "Would upload package to https://test.pypi.org/legacy/" in response.message
        assert response.outputs["version"] == "2.0.0"

    def test_real_run_with_env_credentials(self):
        """Test credentials from the environment reach twine"""
        plugin = PublishPlugin(
            executor=self.executor,
            resolver=self.resolver,
            env_lookup={"PYPI_USERNAME": "envuser", "PYPI_PASSWORD": "envpass"}.get
        )
        response = plugin.execute(ExecuteRequest(
            hook=Hook.POST_PUBLISH,
            context=ReleaseContext(version="4.5.6")
        ))

        assert response.success == True
        assert response.outputs["version"] == "4.5.6"
        args = self.executor.calls[0][1]
        assert args[args.index("-u") + 1] == "envuser"
        assert args[args.index("-p") + 1] == "envpass"

    def test_path_traversal_scenario(self):
        """Test a traversal dist path fails without running twine"""
        response = self.plugin.execute(ExecuteRequest(
            hook=Hook.POST_PUBLISH,
            config={"username": "u", "password": "p", "dist_path": "../../etc/passwd"},
            context=ReleaseContext(version="v1.0.0")
        ))

        assert response.success == False
        assert "path traversal" in response.error
        assert self.executor.calls == []

    def test_failed_upload_scenario(self):
        """Test a failing twine run surfaces its output"""
        executor = self.make_executor(
            output=b"HTTPError: 400",
            error=CommandFailedError("exit status 1", returncode=1)
        )
        plugin = PublishPlugin(executor=executor, resolver=self.resolver, env_lookup={}.get)
        response = plugin.execute(ExecuteRequest(
            hook=Hook.POST_PUBLISH,
            config={"username": "u", "password": "p"},
            context=ReleaseContext(version="v1.0.0")
        ))

        assert response.success == False
        assert "upload failed" in response.error
        assert "HTTPError: 400" in response.error

    def test_skip_existing_scenario(self):
        """Test the recorded arguments for a skip-existing upload"""
        self.plugin.execute(ExecuteRequest(
            hook=Hook.POST_PUBLISH,
            config={"username": "u", "password": "p", "skip_existing": True},
            context=ReleaseContext(version="v1.0.0")
        ))

        assert self.executor.calls[0][0] == "twine"
        assert self.executor.calls[0][1] == [
            "upload",
            "--repository-url", "https://upload.pypi.org/legacy/",
            "-u", "u",
            "-p", "p",
            "--skip-existing",
            "dist/*",
        ]

    def test_hook_given_as_string(self):
        """Test the post-publish hook is recognised by its string value"""
        response = self.plugin.execute(ExecuteRequest(
            hook="post-publish",
            config={"username": "u", "password": "p"},
            context=ReleaseContext(version="v1.0.0")
        ))

        assert response.success == True
        assert response.message == "Successfully uploaded package to https://upload.pypi.org/legacy/"
        assert len(self.executor.calls) == 1

    def test_other_hook_given_as_string(self):
        """Test string values of other hooks are still ignored"""
        response = self.plugin.execute(ExecuteRequest(hook="pre-publish"))

        assert response.success == True
        assert response.message == "Hook pre-publish not handled"
        assert self.executor.calls == []

    def test_unknown_hook(self):
        """Test an unrecognised hook fails without running twine"""
        response = self.plugin.execute(ExecuteRequest(
            hook="post-deploy",
            config={"username": "u", "password": "p"}
        ))

        assert response.success == False
        assert "unknown hook: post-deploy" in response.error
        assert self.executor.calls == []


class TestValidate:
    """Test cases for the pre-flight validate entry point"""

    def setup_method(self):
        """Setup for each test"""
        self.plugin = PublishPlugin(resolver=lambda host: ["151.101.0.223"], env_lookup={}.get)

    def test_valid_config(self):
        """Test a complete config has no errors"""
        report = self.plugin.validate({"username": "u", "password": "p"})
        assert report.is_valid == True
        assert report.errors == {}

    def test_valid_config_with_env_vars(self):
        """Test credentials from the environment satisfy validation"""
        plugin = PublishPlugin(
            resolver=lambda host: ["151.101.0.223"],
            env_lookup={"PYPI_USERNAME": "envuser", "PYPI_PASSWORD": "envpass"}.get
        )
        assert plugin.validate({}).is_valid == True

    def test_missing_credentials(self):
        """Test both credentials are reported with their env var hints"""
        report = self.plugin.validate({})

        assert report.is_valid == False
        assert "PYPI_USERNAME" in report.errors["username"][0]
        assert "PYPI_PASSWORD" in report.errors["password"][0]

    def test_all_violations_collected(self):
        """Test validation aggregates rather than stopping at the first problem"""
        report = self.plugin.validate({
            "repository": "http://pypi.example.com/",
            "dist_path": "/etc/passwd",
        })

        assert set(report.errors) == {"username", "password", "repository", "dist_path"}
        assert "only HTTPS" in report.errors["repository"][0]
        assert "absolute paths" in report.errors["dist_path"][0]

    def test_localhost_http_repository(self):
        """Test a local HTTP test server is acceptable"""
        report = self.plugin.validate({
            "username": "u",
            "password": "p",
            "repository": "http://localhost:8080/legacy/",
        })
        assert report.is_valid == True

    @pytest.mark.parametrize("dist_path,expected", [
        ("../../../etc/passwd", "path traversal"),
        ("/etc/passwd", "absolute paths"),
        ("dist/*; rm -rf /", "invalid characters"),
    ])
    def test_invalid_dist_path(self, dist_path, expected):
        """Test dist path problems are reported under dist_path"""
        report = self.plugin.validate({"username": "u", "password": "p", "dist_path": dist_path})

        assert list(report.errors) == ["dist_path"]
        assert expected in report.errors["dist_path"][0]

    def test_resolver_socket_error_reported(self):
        """Test a resolver raising a plain socket error becomes a repository violation"""
        def broken_resolver(host):
            raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

        plugin = PublishPlugin(resolver=broken_resolver, env_lookup={}.get)
        report = plugin.validate({
            "username": "u",
            "password": "p",
            "repository": "https://x.example/",
        })

        assert list(report.errors) == ["repository"]
        assert "failed to resolve hostname" in report.errors["repository"][0]
