# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .bearer import TokenAuthenticator, auth_required, bearer_token

__all__ = ["TokenAuthenticator", "auth_required", "bearer_token"]
