#%%
import crpmm
import numpy as np
import matplotlib.pyplot as plt

rng = np.random.default_rng(1)
n = 200
alphas = [.5,2,10]

fig,ax = plt.subplots(1,len(alphas),figsize=(7,2.5),sharey=True)
for i,alpha in enumerate(alphas):
    K = np.array([len(crpmm.simulate_crp(n,alpha,random_state=rng)) for _ in range(200)])
    expected = sum(alpha / (alpha + j) for j in range(n))
    ax[i].hist(K,bins=np.arange(K.min(),K.max()+2)-.5,color='k',alpha=.5)
    ax[i].axvline(expected,color='r')
    ax[i].set_title(r'$\alpha = {}$'.format(alpha))
    ax[i].set_xlabel('tables')
plt.tight_layout()

# %%
counts = crpmm.simulate_crp(n,2,random_state=rng)
sizes = np.sort(list(counts.values()))[::-1]
plt.figure(figsize=(4,2.5))
plt.bar(np.arange(len(sizes)),sizes,color='k')
plt.xlabel('table')
plt.ylabel('customers')
plt.tight_layout()

# %%
