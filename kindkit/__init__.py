"""Kubeconfig, node, load balancer and log helpers for local Kubernetes-in-container clusters."""

__version__ = "0.1.0"