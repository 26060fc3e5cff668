"""voiceadmin - voice administration front end for EC2."""

from voiceadmin.cli.main import main

if __name__ == "__main__":
    main()
