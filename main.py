#!/usr/bin/env python
"""CDKTF application entry point.

This module creates the CDKTF application, registers the stack under it
and synthesizes it into Terraform configuration.
"""
from rich import print

from cdktfapp.app import synth
from cdktfapp.schema import CdktfAppConfig

config = CdktfAppConfig.from_settings()

synth(config)

print("App synth complete")
