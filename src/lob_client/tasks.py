"""
Lob API tasks.

Ad-hoc calls against the Lob API from the shell. JSON results go to stdout,
diagnostics go to stderr.

Examples:
    invoke show-config
    invoke get addresses --param limit=2
    invoke post verify --param address_line1="185 Berry St" --param address_zip=94107
    invoke delete addresses/adr_123 --config=lob.yaml
"""

import sys
import json
import logging
from typing import Dict, List, Optional

import yaml
from invoke import Collection, task

from .api_client import APIStatusError, LobClient, LobError
from .config import ConfigException, load_config

logger = logging.getLogger(__name__)

CONFIG_HELP = 'YAML config file (default: LOB_* environment variables)'
PARAM_HELP = 'Request parameter as key=value (repeatable)'


def _build_client(config: Optional[str] = None) -> LobClient:
    """Create a client from a config file or the environment."""
    return LobClient.from_config(load_config(config))


def _parse_params(params: Optional[List[str]]) -> Dict[str, str]:
    """Turn ['k=v', ...] into a wire form."""
    form = {}
    for item in params or []:
        if '=' not in item:
            print(f"❌ Invalid parameter '{item}', expected key=value", file=sys.stderr)
            sys.exit(1)
        key, value = item.split('=', 1)
        form[key.strip()] = value
    return form


def _run(call, *args, **kwargs):
    """Run a client call, print its JSON result and map failures to exit code 1."""
    try:
        result = call(*args, **kwargs)
    except APIStatusError as e:
        print(f"❌ Lob API returned status {e.status_code} for {e.url}", file=sys.stderr)
        if e.result is not None:
            print(json.dumps(e.result, indent=2), file=sys.stderr)
        else:
            print(e.text, file=sys.stderr)
        sys.exit(1)
    except LobError as e:
        print(f"❌ Lob API call failed: {e}", file=sys.stderr)
        sys.exit(1)
    print(json.dumps(result, indent=2))
    return result


def _client_or_exit(config: Optional[str]) -> LobClient:
    try:
        return _build_client(config)
    except ConfigException as e:
        print(e.guidance, file=sys.stderr)
        sys.exit(1)


@task(help={'config': CONFIG_HELP, 'show_secrets': 'Print the API key unmasked'})
def show_config(ctx, config=None, show_secrets=False):
    """
    Show the resolved client configuration as YAML.

    Outputs:
        stdout: YAML configuration (parseable)
        stderr: Diagnostic information
    """
    try:
        resolved = load_config(config)
    except ConfigException as e:
        print(e.guidance, file=sys.stderr)
        sys.exit(1)

    print(f"✅ Configuration loaded from {config or 'environment'}", file=sys.stderr)
    yaml.dump(resolved.to_dict(show_secrets=show_secrets), sys.stdout, default_flow_style=False, sort_keys=True)


@task(iterable=['param'], help={'resource': 'Resource path, e.g. addresses/adr_123',
                                'param': PARAM_HELP, 'config': CONFIG_HELP})
def get(ctx, resource, param=None, config=None):
    """Perform a GET request and print the JSON result."""
    with _client_or_exit(config) as client:
        return _run(client.get, resource, _parse_params(param))


@task(iterable=['param'], help={'resource': 'Resource path, e.g. addresses',
                                'param': PARAM_HELP, 'config': CONFIG_HELP})
def post(ctx, resource, param=None, config=None):
    """Perform a POST request with a url-encoded form body and print the JSON result."""
    with _client_or_exit(config) as client:
        return _run(client.post, resource, _parse_params(param))


@task(help={'resource': 'Resource path, e.g. addresses/adr_123', 'config': CONFIG_HELP})
def delete(ctx, resource, config=None):
    """Perform a DELETE request and print the JSON result."""
    with _client_or_exit(config) as client:
        return _run(client.delete, resource)


ns = Collection(show_config, get, post, delete)
