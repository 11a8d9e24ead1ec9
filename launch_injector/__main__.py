"""Allow ``python -m launch_injector [ARGS...]``."""

from launch_injector.interfaces.cli.launch import main

if __name__ == "__main__":
    main()
