#%%
import crpmm
import numpy as np
import matplotlib.pyplot as plt

figsize=(4,2.5)
colors = crpmm.get_colors()

model = crpmm.CRPMM(alpha=1,beta=.2,seed=123)
corpus, labels = model.generate(n=100,W=40,doc_length=30)
z = np.array([labels[d] for d in corpus])

#%%
model.fit(corpus,sweeps=50)

#%%
chain = model.chain.get_chain(burn_rate=0)

fig,ax = plt.subplots(2,figsize=(5,3))
ax[0].plot(chain['K'],'k')
ax[0].set_title('K')
ax[1].plot(chain['log_joint'],'k')
ax[1].set_title('log_joint')
plt.tight_layout()

#%%
z_hat = model.labels
fig,ax = plt.subplots(2,figsize=figsize,sharex=True)
ax[0].scatter(np.arange(len(z)),z,color=colors[z % len(colors)],s=10)
ax[0].set_ylabel('true')
_, z_hat = np.unique(z_hat,return_inverse=True)
ax[1].scatter(np.arange(len(z_hat)),z_hat,color=colors[z_hat % len(colors)],s=10)
ax[1].set_ylabel('sampled')
ax[1].set_xlabel('document')
plt.tight_layout()

model.plot()

# %%
