# Team labels, in the order teams are filled by quick-add
TEAM_A = "Team A"
TEAM_B = "Team B"
TEAM_LABELS = (TEAM_A, TEAM_B)

# Timeline bar rendering (pixels per second, max width)
TIMELINE_PIXELS_PER_SECOND = 60.0
TIMELINE_MAX_WIDTH = 300.0
