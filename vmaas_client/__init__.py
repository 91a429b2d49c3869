# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

from vmaas_client.logging.logger import configure_null_logger

configure_null_logger()
