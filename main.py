#===============================================================================
#  runmenu  |  Frecency-ranked program launcher for line pickers
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Indexes launchable programs (Start Menu shortcuts, executables on PATH) and
#  feeds them to an external line picker (wlines, dmenu, fzf...) ordered by how
#  often and how recently each one was launched.
#  Supports:
#    - index           rebuild the program index
#    - run [args...]   show the picker (args are passed to it) and launch the
#                      chosen program; text typed after "<entry>:" is split
#                      shell-style and passed as the program's arguments
#
#  Files
#  -----
#    <data dir>/runmenu_index.json    -> program index (rebuilt by "index")
#    <data dir>/runmenu_history.json  -> launch counts + last launch times
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (platformdirs, python-dotenv) which
#  are licensed separately by their respective authors. Ensure compliance with
#  their license terms when distributing this software.
#===============================================================================

import sys

from runmenu.cli import main


if __name__ == "__main__":
    sys.exit(main())
