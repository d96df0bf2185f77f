"""
Console driver for the intake flow.

Talks to the state machine directly (no HTTP) using the configured
policy file, claim file and LLM provider.
Run with: python debug_chat.py
"""
from claimgenie.core.logging import logger
from claimgenie.orchestration.intake.machine import get_intake_machine


def main() -> None:
    machine = get_intake_machine()
    session_id = None

    print("ClaimGenie console. Type 'quit' to exit.")
    print("Please enter your policy number, or 'retrieve claim' to look up a claim.\n")

    while True:
        try:
            message = input("you> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if message.strip().lower() in ("quit", "exit"):
            break

        session_id, reply = machine.handle_message(session_id, message)
        logger.debug(f"session={session_id} state={machine.session_store.get(session_id)['state']}")
        print(f"\ngenie> {reply}\n")


if __name__ == "__main__":
    main()
