# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0
