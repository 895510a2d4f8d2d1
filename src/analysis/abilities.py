"""Ability catalog used to decorate AI overviews.

Each entry lists the position groups it applies to; "Any" matches every
position.
"""

from typing import NamedTuple


class AbilitySpec(NamedTuple):
    name: str
    positions: tuple[str, ...]
    description: str


TIERS: tuple[str, ...] = ("Bronze", "Silver", "Gold", "Platinum", "X-Factor")

# Roster position codes -> ability position groups
POSITION_GROUPS: dict[str, str] = {
    "RB": "HB",
    "TB": "HB",
    "OT": "OL",
    "OG": "OL",
    "G": "OL",
    "T": "OL",
    "C": "OL",
    "IOL": "OL",
    "DT": "DL",
    "DE": "DL",
    "NT": "DL",
    "EDGE": "DL",
    "ILB": "LB",
    "OLB": "LB",
    "MLB": "LB",
    "DB": "CB",
    "FS": "S",
    "SS": "S",
    "PK": "K",
}

ABILITIES: tuple[AbilitySpec, ...] = (
    AbilitySpec("Backfield Creator", ("QB",), "Exceptional at creating plays from the backfield."),
    AbilitySpec("Off Platform", ("QB",), "Throws accurately while throwing off-platform."),
    AbilitySpec("Pull Down", ("QB",), "Can quickly pull the ball down and run."),
    AbilitySpec("On Time", ("QB",), "Delivers accurate passes with perfect timing."),
    AbilitySpec("Sleight Of Hand", ("QB",), "Excels at faking handoffs and play-action."),
    AbilitySpec("Mobile Deadeye", ("QB",), "Maintains accuracy while throwing on the run."),
    AbilitySpec("Dual Threat", ("QB",), "Effective passer and runner."),
    AbilitySpec("Downhill", ("QB",), "Picks up extra yards falling forward when scrambling."),
    AbilitySpec("Extender", ("QB",), "Extends plays outside the pocket effectively."),
    AbilitySpec("Option King", ("QB",), "Master of option reads and execution."),
    AbilitySpec("Dot Dot!", ("QB",), "High accuracy on deep throws."),
    AbilitySpec("Mobile Resistance", ("QB",), "Resists pressure while scrambling."),
    AbilitySpec("Pocket Passer", ("QB",), "Elite accuracy and decision-making from the pocket."),
    AbilitySpec("Resistance", ("QB",), "Resists pressure while in the pocket."),
    AbilitySpec("Step Up", ("QB",), "Steps up in the pocket to avoid edge rushers."),
    AbilitySpec("Pure Runner", ("QB",), "Elite rushing ability for a QB."),
    AbilitySpec("Magician", ("QB",), "Creates something out of nothing with incredible plays."),
    AbilitySpec("Shifty", ("QB",), "Elusive with quick jukes and cuts as a runner."),
    AbilitySpec("Side Step", ("QB",), "Avoids defenders with quick side steps."),
    AbilitySpec("Workhorse", ("QB",), "Durable and reliable, can handle heavy workload."),
    AbilitySpec("Backfield Threat", ("HB",), "Dangerous receiving threat out of the backfield."),
    AbilitySpec("360", ("HB",), "Can spin out of tackles effectively."),
    AbilitySpec("Safety Valve", ("HB", "TE"), "Reliable target on short passes when primary reads are covered."),
    AbilitySpec("Takeoff", ("HB", "WR", "TE"), "Quick acceleration and burst."),
    AbilitySpec("Recoup", ("HB", "WR", "TE"), "Recovers quickly after taking a hit or making a cut."),
    AbilitySpec("Contact Seeker", ("HB",), "Actively seeks contact to fall forward for extra yards."),
    AbilitySpec("Battering Ram", ("HB",), "Breaks tackles with sheer power."),
    AbilitySpec("Ball Security", ("HB", "FB"), "Protects the ball well to avoid fumbles."),
    AbilitySpec("Balanced", ("HB", "WR", "TE", "FB", "OL", "S"), "Well-rounded skills in multiple areas."),
    AbilitySpec("East/West Playmaker", ("HB",), "Excels at making defenders miss with lateral movement."),
    AbilitySpec("Arm Bar", ("HB", "WR"), "Fights for extra yards by stiff-arming defenders."),
    AbilitySpec("Elusive Bruiser", ("HB",), "Combines elusiveness with breaking tackles."),
    AbilitySpec("Headfirst", ("HB", "WR"), "Dives forward to gain extra yards."),
    AbilitySpec("North/South", ("HB",), "Runs directly upfield, rarely losing yards."),
    AbilitySpec("Blocking Strong Grip", ("FB",), "Maintains strong blocks against defenders."),
    AbilitySpec("Second Level", ("FB", "OL", "TE"), "Engages and sustains blocks on second level defenders (LBs, Safeties)."),
    AbilitySpec("Pocket Shield", ("FB", "OL"), "Provides elite pass protection for the quarterback."),
    AbilitySpec("Sidekick", ("FB",), "An effective and reliable blocking companion."),
    AbilitySpec("Screen Enforcer", ("FB", "OL"), "Dominates blocks on screen plays."),
    AbilitySpec("Utility", ("FB",), "Versatile, can block, run, or catch effectively."),
    AbilitySpec("Contested Specialist", ("WR",), "Dominant in contested catch situations."),
    AbilitySpec("50/50", ("WR", "TE"), "Wins jump balls and contested catches frequently."),
    AbilitySpec("Cutter", ("WR", "TE"), "Executes sharp, precise cuts on routes."),
    AbilitySpec("Double Dip", ("WR", "TE"), "Excels at double moves to create separation."),
    AbilitySpec("Gadget", ("WR",), "Versatile in various offensive packages, including runs."),
    AbilitySpec("Sure Hands", ("WR", "TE"), "Rarely drops catchable passes."),
    AbilitySpec("Physical Route Runner", ("WR", "TE"), "Uses physicality to gain separation on routes."),
    AbilitySpec("Route Artist", ("WR",), "Master of route running, creates consistent separation."),
    AbilitySpec("Speedster", ("WR",), "Possesses elite straight-line speed."),
    AbilitySpec("Wear Down", ("TE", "OL", "DL"), "Gradually wears down defenders with sustained effort."),
    AbilitySpec("Pure Blocker", ("TE",), "An elite run-blocking tight end."),
    AbilitySpec("Quick Drop", ("TE", "OL"), "Quickly gets into blocking position off the snap."),
    AbilitySpec("Vertical Threat", ("TE",), "A dangerous deep threat from the tight end position."),
    AbilitySpec("Agile", ("OL",), "Quick and nimble, excels in pulling or zone schemes."),
    AbilitySpec("Option Shield", ("OL",), "Maintains blocks effectively on option plays."),
    AbilitySpec("Raw Strength", ("OL",), "Dominates defenders with sheer power."),
    AbilitySpec("Ground N Pound", ("OL",), "Excels at opening running lanes in power schemes."),
    AbilitySpec("Well Rounded", ("OL",), "Strong in both run blocking and pass protection."),
    AbilitySpec("Edge Setter", ("DL",), "Consistently sets a strong edge against outside runs."),
    AbilitySpec("Gap Specialist", ("DL",), "Excels at filling and defending specific gaps."),
    AbilitySpec("Grip Breaker", ("DL", "LB"), "Sheds blockers quickly to get to the ball carrier/QB."),
    AbilitySpec("Inside Disruptor", ("DL", "LB"), "Penetrates interior offensive line for disruption."),
    AbilitySpec("Outside Disruptor", ("DL", "LB"), "Excels at pressuring from the edge."),
    AbilitySpec("Pocket Disruptor", ("DL",), "Consistently collapses the pocket around the QB."),
    AbilitySpec("Quick Jump", ("DL", "CB"), "Gets an explosive jump off the line of scrimmage."),
    AbilitySpec("Power Rusher", ("DL",), "Uses strength to bull rush and overwhelm blockers."),
    AbilitySpec("Duress", ("DL", "LB"), "Applies significant pressure on the quarterback, forcing errant throws."),
    AbilitySpec("Take Down", ("DL",), "Consistently brings down ball carriers for minimal gain."),
    AbilitySpec("Speed Rusher", ("DL",), "Uses speed and agility to get around blockers."),
    AbilitySpec("Lurker", ("LB",), "Excellent at intercepting passes from the middle."),
    AbilitySpec("House Call", ("LB", "CB", "S"), "Capable of returning turnovers for touchdowns."),
    AbilitySpec("Knockout", ("LB", "CB", "S"), "Delivers powerful hits to dislodge the ball."),
    AbilitySpec("Bouncer", ("LB", "S"), "Bounces off blocks and continues pursuit."),
    AbilitySpec("Hammer", ("LB", "S"), "Delivers forceful, tackle-breaking hits."),
    AbilitySpec("Signal Caller", ("LB",), "Commands the defense and makes pre-snap adjustments."),
    AbilitySpec("Thumper", ("LB",), "A hard-hitting run stopper."),
    AbilitySpec("Aftershock", ("LB", "S"), "Delivers secondary hits to disrupt plays even after the initial tackle."),
    AbilitySpec("Boundary Jammer", ("CB",), "Excels at pressing receivers on the sideline."),
    AbilitySpec("Blanket Coverage", ("CB", "S"), "Sticks tightly to receivers in man coverage."),
    AbilitySpec("Bump and Run", ("CB",), "Effective at disrupting routes with physical press coverage."),
    AbilitySpec("Ballhawk", ("CB", "S"), "Instinctive playmaker for interceptions."),
    AbilitySpec("Field", ("CB",), "Excels at playing the field side of the defense."),
    AbilitySpec("Robber", ("S", "CB"), "Reads the QB and jumps routes for interceptions in the middle."),
    AbilitySpec("Zone", ("CB", "S"), "Excels in zone coverage, breaking on passes."),
    AbilitySpec("Box Specialist", ("S",), "Dominant run defender near the line of scrimmage."),
    AbilitySpec("Coverage Specialist", ("S",), "Elite skills in pass coverage."),
    AbilitySpec("Hybrid", ("S",), "Excels at both run support and pass coverage."),
    AbilitySpec("Accurate", ("K", "P"), "Consistent accuracy on kicks/punts."),
    AbilitySpec("Chip Shot", ("K",), "Highly reliable on short-range field goals."),
    AbilitySpec("Deep Range", ("K", "P"), "Can kick/punt from long distances."),
    AbilitySpec("Mega Leg", ("K", "P"), "Possesses exceptional leg strength."),
    AbilitySpec("Coffin Corner", ("P",), "Excels at pinning opponents deep with precision punts."),
    AbilitySpec("Best Friend", ("Any",), "Boosts teammates' morale and performance."),
    AbilitySpec("Clear Headed", ("Any",), "Maintains composure and makes smart decisions under pressure."),
    AbilitySpec("Clutch Kicker", ("K", "P", "Any"), "Performs best in high-pressure kicking situations."),
    AbilitySpec("Defensive Rally", ("DL", "LB", "CB", "S"), "Inspires defensive teammates to play harder."),
    AbilitySpec("Fan Favorite", ("Any",), "A fan favorite, providing a boost to team energy."),
    AbilitySpec("Field General", ("QB",), "Commands the offense and makes smart decisions pre-snap."),
    AbilitySpec("Hot Head", ("DL", "LB"), "Can get overly aggressive, sometimes leading to penalties."),
    AbilitySpec("Headstrong", ("DL", "LB"), "Resists being fooled by fakes and misdirection."),
    AbilitySpec("Legion", ("DL", "LB", "CB", "S"), "A leader on defense, boosting morale and effectiveness."),
    AbilitySpec("Offensive Rally", ("QB", "RB", "WR", "TE", "OL", "FB"), "Inspires offensive teammates to play harder."),
    AbilitySpec("Road Dog", ("Any",), "Excels in hostile away game environments."),
    AbilitySpec("Team Player", ("Any",), "Puts team success above individual stats."),
    AbilitySpec("The Natural", ("Any",), "Possesses innate talent and instincts for the game."),
    AbilitySpec("Winning Time", ("Any",), "Performs exceptionally well in critical late-game situations."),
)
