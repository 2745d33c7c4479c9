"""Built-in hand-authored levels.

Four 30x20 layouts. Agent, destination and enemy start cells are listed
separately from the layout and placed on top of empty layout cells.
"""

from typing import Dict, Tuple

from grid_pursuit.coordinates import Coordinates
from grid_pursuit.levels.level import Level


LEVELS: Tuple[Level, ...] = (
    Level(
        layout=(
            "##############################",
            "#                 #     #    #",
            "#                 #     #    #",
            "##########        #     #    #",
            "#               # #     #    #",
            "#  ############## #     #    #",
            "#   #           # #     #    #",
            "#   #           # #     #    #",
            "#   #    ##########     #    #",
            "#   #                   #    #",
            "#   #                        #",
            "#   ##########               #",
            "#   #  #    #    #############",
            "#   #  #    #                #",
            "#      #    #     ############",
            "#      #    #                #",
            "#                   #        #",
            "#  ##########       #        #",
            "#           #       #        #",
            "##############################",
        ),
        agent=Coordinates(11, 2),
        destination=Coordinates(25, 17),
        enemies=(
            Coordinates(7, 8),
            Coordinates(27, 5),
            Coordinates(11, 18),
        ),
    ),
    Level(
        layout=(
            "##############################",
            "#                            #",
            "#     ########################",
            "#     #            #         #",
            "#     #            #         #",
            "#     #            #    #    #",
            "#     #            #    #    #",
            "#     #            #    #    #",
            "#     ####         #    #    #",
            "#           #      #    #    #",
            "#           #      #    #    #",
            "#           # ######    #    #",
            "#           #           #    #",
            "#     ####  #           #    #",
            "#     #                 #    #",
            "#     #     ########    #    #",
            "#     #            #    #    #",
            "#     #            #    #    #",
            "#                  #    #    #",
            "##############################",
        ),
        agent=Coordinates(2, 2),
        destination=Coordinates(27, 17),
        enemies=(
            Coordinates(2, 14),
            Coordinates(14, 9),
        ),
    ),
    Level(
        layout=(
            "##############################",
            "#   #                 #      #",
            "#   #                 #      #",
            "#   #                 #      #",
            "#   #  ############   #      #",
            "#   #                 #      #",
            "#   #                        #",
            "#         #                  #",
            "#         #       ############",
            "#         #                  #",
            "#         #                  #",
            "#         #                  #",
            "#         #    ############  #",
            "#         #                  #",
            "#                     #      #",
            "#                     #      #",
            "#   ############      #      #",
            "#                     #      #",
            "#                     #      #",
            "##############################",
        ),
        agent=Coordinates(2, 1),
        destination=Coordinates(25, 17),
        enemies=(
            Coordinates(2, 17),
            Coordinates(25, 5),
            Coordinates(12, 10),
        ),
    ),
    Level(
        layout=(
            "##############################",
            "#                 #          #",
            "#                 #          #",
            "#    #####        #          #",
            "#                 #          #",
            "#  ################          #",
            "#   #                        #",
            "#   #                        #",
            "#   #########    ########    #",
            "#                       #    #",
            "#                            #",
            "#   ####    ##               #",
            "#   #  #    #    #############",
            "#   #  #    #                #",
            "#      #    #     ##         #",
            "#      #    #     #          #",
            "#      #    #######          #",
            "#      ######                #",
            "#                            #",
            "##############################",
        ),
        agent=Coordinates(11, 2),
        destination=Coordinates(25, 17),
        enemies=(
            Coordinates(7, 7),
            Coordinates(27, 7),
            Coordinates(11, 18),
        ),
    ),
)

LEVEL_REGISTRY: Dict[str, Level] = {
    f"level-{index + 1}": level for index, level in enumerate(LEVELS)
}
"""Name to level mapping used by the command line front end."""
