"""Entry point for running the resolver CLI as a module.

Usage:
    python -m oktetoconfig kubeconfig
"""

from oktetoconfig.cli import main

if __name__ == "__main__":
    main()
