"""Sample failed transactions for demos and the batch mode."""

DEMO_TRANSACTIONS: dict[str, dict[str, object]] = {
    "out-of-gas": {
        "hash": "0x1a2b3c4d5e6f7a8b9c0d1e2f3a4b5c6d7e8f9a0b1c2d3e4f5a6b7c8d9e0f1a2b",
        "network": "Ethereum Mainnet",
        "from": "0xUserWallet123...abc",
        "to": "0xUniswapV2Router02",
        "contractName": "Uniswap V2 Router",
        "functionName": "swapExactTokensForETH",
        "gasUsed": "21000",
        "gasLimit": "21000",
        "gasPrice": "30 Gwei",
        "value": "0",
        "nonce": "42",
        "error": "out of gas",
        "revertReason": "Transaction ran out of gas",
        "inputData": "0x18cbafe5....",
        "timestamp": "2024-01-15T10:23:45Z",
        "additionalContext": {
            "tokenIn": "USDC",
            "tokenOut": "ETH",
            "amountIn": "1000 USDC",
            "estimatedGas": "150000",
            "actualGasLimit": "21000",
        },
    },
    "slippage": {
        "hash": "0x9f8e7d6c5b4a3f2e1d0c9b8a7f6e5d4c3b2a1f0e9d8c7b6a5f4e3d2c1b0a9f8e",
        "network": "Ethereum Mainnet",
        "from": "0xTrader456...def",
        "to": "0xUniswapV3Router",
        "contractName": "Uniswap V3 Router",
        "functionName": "exactInputSingle",
        "gasUsed": "98543",
        "gasLimit": "200000",
        "gasPrice": "25 Gwei",
        "value": "1.5",
        "nonce": "7",
        "error": "execution reverted",
        "revertReason": "Too little received",
        "inputData": "0x04e45aaf....",
        "timestamp": "2024-01-15T11:45:00Z",
        "additionalContext": {
            "tokenIn": "ETH",
            "tokenOut": "PEPE",
            "amountIn": "1.5 ETH",
            "slippageTolerance": "0.1%",
            "priceImpact": "8.5%",
            "poolLiquidity": "Low",
        },
    },
    "allowance": {
        "hash": "0x3c4d5e6f7a8b9c0d1e2f3a4b5c6d7e8f9a0b1c2d3e4f5a6b7c8d9e0f1a2b3c4d",
        "network": "Polygon",
        "from": "0xDeFiUser789...ghi",
        "to": "0xAaveV3Pool",
        "contractName": "Aave V3 Lending Pool",
        "functionName": "supply",
        "gasUsed": "45231",
        "gasLimit": "300000",
        "gasPrice": "100 Gwei",
        "value": "0",
        "nonce": "156",
        "error": "execution reverted",
        "revertReason": "ERC20: transfer amount exceeds allowance",
        "inputData": "0x617ba037....",
        "timestamp": "2024-01-15T14:20:30Z",
        "additionalContext": {
            "token": "USDT",
            "attemptedAmount": "5000 USDT",
            "currentAllowance": "0 USDT",
            "spender": "Aave V3 Pool",
        },
    },
    "paused": {
        "hash": "0x7b8c9d0e1f2a3b4c5d6e7f8a9b0c1d2e3f4a5b6c7d8e9f0a1b2c3d4e5f6a7b8c",
        "network": "Arbitrum",
        "from": "0xYieldFarmer321...jkl",
        "to": "0xCompoundProtocol",
        "contractName": "Compound Finance",
        "functionName": "mint",
        "gasUsed": "31000",
        "gasLimit": "250000",
        "gasPrice": "0.1 Gwei",
        "value": "0",
        "nonce": "89",
        "error": "execution reverted",
        "revertReason": "Pausable: paused",
        "inputData": "0xa0712d68....",
        "timestamp": "2024-01-15T16:55:10Z",
        "additionalContext": {
            "reason": "Emergency pause triggered due to oracle manipulation",
            "pausedAt": "2024-01-15T16:40:00Z",
            "governance": "Multi-sig",
        },
    },
}
