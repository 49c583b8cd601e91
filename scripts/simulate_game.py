"""Simulate a match with a random agent in the player seat."""

from unoduel.agents import RandomAgent
from unoduel.engine import MatchView, Side, draw, get_legal_actions, new_match, play
from unoduel.engine.rules import DrawCard


def main():
    agent = RandomAgent("Random", seed=42)
    state = new_match(wager=10, seed=42)

    while state.winner is None:
        legal = get_legal_actions(state, Side.PLAYER)
        action = agent.get_action(MatchView.from_state(state), legal)
        if action is None or isinstance(action, DrawCard):
            report = draw(state, Side.PLAYER)
        else:
            report = play(state, Side.PLAYER, action.card, action.chosen_color)
        for event in report.events:
            print(f"> {event}")

    print(f"Match finished! Winner: {state.winner.value}")
    print(f"Events: {len(state.history)}")


if __name__ == "__main__":
    main()
