"""Services Layer — orchestration between the Lokalise client and pure core logic.

Invariants:
    - Services receive an already-authenticated LokaliseClient; they never resolve
      credentials themselves
    - Services own failure policy; routes only format the envelope
"""
