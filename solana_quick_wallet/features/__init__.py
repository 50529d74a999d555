"""Feature modules for Solana Quick Wallet.

- balance: SOL and SPL token balance lookups
- transfer: SOL and SPL token transfers
"""
