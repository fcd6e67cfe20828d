import sys

from gestion_clinique.main import main

sys.exit(main())
