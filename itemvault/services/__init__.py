"""
Service layer for the record-keeping samples.

Each service owns its repositories, applies the sample's rules, and
turns repository errors into messages for the console.
"""
