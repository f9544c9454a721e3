import sys

from statsparser.run_statistics import main

sys.exit(main())
