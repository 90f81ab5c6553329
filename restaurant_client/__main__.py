import sys

from restaurant_client.cli import main

sys.exit(main())
