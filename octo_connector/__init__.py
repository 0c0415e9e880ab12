"""OCTO supplier connector."""
