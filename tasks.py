"""
Invoke task collection for working against the Lob API from a checkout.

Run `invoke --list` to see the available tasks.
"""

from lob_client.tasks import ns
