import sys

from ddbot.adapters.discord.launcher import main

sys.exit(main())
